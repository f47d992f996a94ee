"""Core constants, configuration and exceptions.

This package provides:
- ABI word constants (WORD_LENGTH, WORD_BYTES)
- Configuration (DecodeConfig)
- Error taxonomy (DecodingError, OutOfRangeError, MalformedHexError, ...)
"""

from abilog.core.config import DEFAULT_CONFIG, DecodeConfig
from abilog.core.constants import HEX_PREFIX, WORD_BYTES, WORD_LENGTH
from abilog.core.exceptions import (
    AbilogError,
    DecodingError,
    MalformedHexError,
    OutOfRangeError,
    UnsupportedTypeError,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DecodeConfig",
    "HEX_PREFIX",
    "WORD_BYTES",
    "WORD_LENGTH",
    "AbilogError",
    "DecodingError",
    "MalformedHexError",
    "OutOfRangeError",
    "UnsupportedTypeError",
]
