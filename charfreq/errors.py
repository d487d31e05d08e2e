from typing import Union


class CharfreqError(Exception):
    """Base class for every error raised while counting characters."""


class DecodeError(CharfreqError):
    """The input bytes could not be decoded into text.

    Attributes:
        encoding (`str`) - the codec that rejected the input
        position (`int`) - byte offset of the first malformed sequence, if known
    """

    def __init__(self, message: str, encoding: str, position: Union[int, None] = None):
        super().__init__(message)
        self.encoding = encoding
        self.position = position


class InvalidOption(CharfreqError):
    """An option was out of range, unrecognized, or contradicted another option."""

    def __init__(self, message: str, option: Union[str, None] = None):
        super().__init__(message)
        self.option = option
