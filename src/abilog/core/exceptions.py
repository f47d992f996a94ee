"""Custom exceptions for abilog package."""

from __future__ import annotations


class AbilogError(Exception):
    """Base exception for abilog package."""

    pass


class DecodingError(AbilogError):
    """Exception raised when log data cannot be decoded."""

    pass


class OutOfRangeError(DecodingError, IndexError):
    """A chunk index beyond the available words was requested."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"chunk index {index} out of range for {size} chunk(s)")


class MalformedHexError(DecodingError, ValueError):
    """A word could not be read as hexadecimal data.

    `index` is the offending chunk, `context` names the field being read.
    """

    def __init__(self, index: int, context: str, reason: str | None = None) -> None:
        self.index = index
        self.context = context
        self.reason = reason
        msg = f"chunk {index}: {context}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class UnsupportedTypeError(AbilogError, ValueError):
    """An ABI type has no decoding rule."""

    pass
