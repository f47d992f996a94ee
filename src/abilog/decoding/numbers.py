"""Hex string to unsigned integer conversion."""

from __future__ import annotations

import re

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def from_hex_string(value: str) -> int:
    """Parse bare hexadecimal digits (no 0x prefix) as an unsigned integer.

    `int(x, 16)` alone would also accept prefixes, signs, whitespace and
    underscores, none of which are valid inside an ABI word.
    """
    if not _HEX_DIGITS.fullmatch(value):
        raise ValueError(f"invalid hex string: {value!r}")
    return int(value, 16)


def is_hex_word(value: str, length: int) -> bool:
    return len(value) == length and _HEX_DIGITS.fullmatch(value) is not None
