import codecs
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Union

from charfreq.errors import InvalidOption


class SortBy(Enum):
    """Report orderings"""

    CHARACTER = "character"  # code point ascending
    COUNT = "count"  # count descending, then code point ascending

    @classmethod
    def parse(cls, value: Union["SortBy", str]) -> "SortBy":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "char":
            name = "character"
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise InvalidOption(
                f"unrecognized sort key '{value}' (expected one of: {choices})",
                option="sort_by",
            ) from None


ERROR_HANDLERS = ("strict", "replace", "ignore")


@dataclass(frozen=True)
class Options:
    """Everything that shapes a report.

    Thresholds are inclusive, apart from `more_than_count` and `less_than_count`,
    and are applied before sorting and truncation, so `show_top_n` picks from the
    entries that survived filtering. Percentage thresholds compare against each
    entry's share of all counted characters.

    Args:
        sort_by (`SortBy` or `str`) - order of the report
        show_top_n (`int`) - keep only the first N entries after sorting
        as_percentage (`bool`) - render shares instead of raw counts
        min_count, max_count, exact_count (`int`) - count thresholds
        more_than_count, less_than_count (`int`) - strict count thresholds
        min_percentage, max_percentage (`float`) - percentage thresholds, (0, 100]
        include_whitespace (`bool`) - count whitespace characters too
        encoding (`str`) - codec used for byte input
        errors (`str`) - "strict" fails on malformed input, "replace" counts each
            bad sequence as U+FFFD, "ignore" drops it
        precision (`int`) - decimal places for percentages
    """

    sort_by: SortBy = SortBy.CHARACTER
    show_top_n: Union[int, None] = None
    as_percentage: bool = False
    min_count: Union[int, None] = None
    max_count: Union[int, None] = None
    exact_count: Union[int, None] = None
    more_than_count: Union[int, None] = None
    less_than_count: Union[int, None] = None
    min_percentage: Union[float, None] = None
    max_percentage: Union[float, None] = None
    include_whitespace: bool = False
    encoding: str = "utf-8"
    errors: str = "strict"
    precision: int = 2

    def __post_init__(self):
        # frozen, so normalize through object.__setattr__
        object.__setattr__(self, "sort_by", SortBy.parse(self.sort_by))

        for name in (
            "show_top_n",
            "min_count",
            "max_count",
            "exact_count",
            "more_than_count",
            "less_than_count",
        ):
            _check_positive_int(name, getattr(self, name))
        for name in ("min_percentage", "max_percentage"):
            _check_percentage(name, getattr(self, name))

        if (
            self.min_count is not None
            and self.max_count is not None
            and self.min_count > self.max_count
        ):
            raise InvalidOption(
                f"min_count ({self.min_count}) is greater than "
                f"max_count ({self.max_count})",
                option="min_count",
            )
        if (
            self.min_percentage is not None
            and self.max_percentage is not None
            and self.min_percentage > self.max_percentage
        ):
            raise InvalidOption(
                f"min_percentage ({self.min_percentage}) is greater than "
                f"max_percentage ({self.max_percentage})",
                option="min_percentage",
            )

        if (
            self.more_than_count is not None
            and self.less_than_count is not None
            and self.more_than_count >= self.less_than_count
        ):
            raise InvalidOption(
                f"more_than_count ({self.more_than_count}) is not less than "
                f"less_than_count ({self.less_than_count})",
                option="more_than_count",
            )

        try:
            codec = codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidOption(
                f"unknown encoding '{self.encoding}'", option="encoding"
            ) from None
        # rot13, base64, hex and friends are codecs but not text encodings
        if not codec._is_text_encoding:
            raise InvalidOption(
                f"'{self.encoding}' is not a text encoding", option="encoding"
            )
        if self.errors not in ERROR_HANDLERS:
            raise InvalidOption(
                f"unknown error handler '{self.errors}' "
                f"(expected one of: {', '.join(ERROR_HANDLERS)})",
                option="errors",
            )

        if (
            isinstance(self.precision, bool)
            or not isinstance(self.precision, int)
            or self.precision < 0
        ):
            raise InvalidOption(
                f"precision must be a non-negative integer, got {self.precision!r}",
                option="precision",
            )


def _check_positive_int(name: str, value):
    if value is None:
        return
    # bool is an int subclass, but --show-top-n True is never meant
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidOption(
            f"{name} must be a positive integer, got {value!r}", option=name
        )


def _check_percentage(name: str, value):
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, Real) or not 0 < value <= 100:
        raise InvalidOption(
            f"{name} must be greater than 0 and at most 100, got {value!r}",
            option=name,
        )
