from collections import Counter
import dataclasses
import logging
from typing import Iterable, List, Union

from charfreq.entry import ResultEntry
from charfreq.options import Options, SortBy
from charfreq.tally import decode, tally

logger = logging.getLogger(__name__)


def analyze(
    data: Union[bytes, str], options: Union[Options, None] = None, **overrides
) -> List[ResultEntry]:
    """Count the characters of `data` and shape them into a report.

    Decoding, tallying, filtering, sorting and truncation all happen here; the
    result is ready for `render`. Keyword arguments override fields of `options`
    and are validated the same way.

    Args:
        data (`bytes` or `str`) - the text to analyze
        options (`Options`) - report configuration, defaults to `Options()`

    Raises:
        DecodeError: when `data` is bytes that are malformed under strict decoding
        InvalidOption: when an override is out of range
    """
    if options is None:
        options = Options()
    if overrides:
        options = dataclasses.replace(options, **overrides)

    text = decode(data, options.encoding, options.errors)
    table = tally(text, include_whitespace=options.include_whitespace)
    return select(entries(table), options)


def entries(table: Counter) -> List[ResultEntry]:
    """one entry per tallied character, in character order"""
    total = table.total()
    return [
        ResultEntry(character, count, count * 100 / total)
        for character, count in sorted(table.items(), key=lambda x: ord(x[0]))
        if count > 0
    ]


def select(results: Iterable[ResultEntry], options: Options) -> List[ResultEntry]:
    """filter, then sort, then truncate"""
    results = list(results)
    kept = [e for e in results if _passes(e, options)]
    logger.debug("%d of %d entries passed the thresholds", len(kept), len(results))

    ordered = sort_entries(kept, options.sort_by)
    if options.show_top_n is not None:
        ordered = ordered[: options.show_top_n]
    return ordered


def sort_entries(
    results: Iterable[ResultEntry], sort_by: Union[SortBy, str] = SortBy.CHARACTER
) -> List[ResultEntry]:
    if SortBy.parse(sort_by) is SortBy.COUNT:
        return sorted(results, key=lambda e: (-e.count, e.ordinal))
    return sorted(results, key=lambda e: e.ordinal)


def _passes(entry: ResultEntry, options: Options) -> bool:
    if options.min_count is not None and entry.count < options.min_count:
        return False
    if options.max_count is not None and entry.count > options.max_count:
        return False
    if options.exact_count is not None and entry.count != options.exact_count:
        return False
    if options.more_than_count is not None and entry.count <= options.more_than_count:
        return False
    if options.less_than_count is not None and entry.count >= options.less_than_count:
        return False
    if options.min_percentage is not None and entry.percentage < options.min_percentage:
        return False
    if options.max_percentage is not None and entry.percentage > options.max_percentage:
        return False
    return True


def format_entry(
    entry: ResultEntry, as_percentage: bool = False, precision: int = 2
) -> str:
    if as_percentage:
        return f"{entry.display}: {entry.percentage:.{precision}f}%"
    return f"{entry.display}: {entry.count}"


def render(
    results: Iterable[ResultEntry], as_percentage: bool = False, precision: int = 2
) -> List[str]:
    return [format_entry(e, as_percentage, precision) for e in results]
