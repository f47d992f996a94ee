from __future__ import annotations

# ABI words are 32 bytes, written as 64 hex characters
WORD_LENGTH = 64
WORD_BYTES = WORD_LENGTH // 2
HEX_PREFIX = "0x"
