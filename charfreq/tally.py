from collections import Counter
import logging
from typing import Union

from charfreq.errors import DecodeError, InvalidOption

logger = logging.getLogger(__name__)


def decode(
    data: Union[bytes, bytearray, str], encoding: str = "utf-8", errors: str = "strict"
) -> str:
    """Turn raw input into a string of code points.

    Text that is already a `str` is returned untouched.

    Args:
        data (`bytes` or `str`) - the input to decode
        encoding (`str`) - codec name
        errors (`str`) - codec error handler; "strict" raises on malformed input
    """
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode(encoding, errors)
    except UnicodeDecodeError as e:
        raise DecodeError(
            f"input is not valid {encoding}: {e.reason} at byte {e.start}",
            encoding=encoding,
            position=e.start,
        ) from e
    except LookupError as e:
        raise InvalidOption(str(e), option="encoding") from e


def tally(text: str, include_whitespace: bool = False) -> Counter:
    """count every code point in `text`

    Whitespace is skipped unless `include_whitespace` is set, so the total of the
    returned counter is the number of code points actually counted.
    """
    if include_whitespace:
        table = Counter(text)
    else:
        table = Counter(c for c in text if not c.isspace())
    logger.debug(
        "tallied %d characters (%d distinct) from %d code points",
        table.total(),
        len(table),
        len(text),
    )
    return table
