"""Word-chunked view over the `data` section of an event log.

`DataChunks` holds the payload as an immutable sequence of 64-char hex words.
Static arguments are read straight from their word; dynamic `bytes` arguments
go through `value_of_dyn_type`, which follows

    pointer word -> length word -> payload words

where the pointer is a byte offset from the start of the data section.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from eth_utils import remove_0x_prefix

from abilog.core.constants import HEX_PREFIX, WORD_BYTES, WORD_LENGTH
from abilog.core.exceptions import MalformedHexError, OutOfRangeError
from abilog.decoding.numbers import from_hex_string, is_hex_word


class DataChunks:
    """Ordered, read-only sequence of ABI words (index i == i-th 32-byte word)."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]) -> None:
        self._words: tuple[str, ...] = tuple(words)

    # ---------- construction ----------

    @classmethod
    def from_data(cls, data: str | bytes, *, validate: bool = True) -> DataChunks:
        """Split raw log data (0x-hex string or bytes) into words.

        A trailing partial word is rejected; with `validate` every word must
        also be valid hex.
        """
        hex_data = data.hex() if isinstance(data, (bytes, bytearray)) else remove_0x_prefix(data)
        n_full, carry = divmod(len(hex_data), WORD_LENGTH)
        if carry:
            raise MalformedHexError(n_full, "truncated word", f"{carry} trailing hex characters")

        words = [hex_data[i * WORD_LENGTH : (i + 1) * WORD_LENGTH] for i in range(n_full)]
        if validate:
            for i, w in enumerate(words):
                if not is_hex_word(w, WORD_LENGTH):
                    raise MalformedHexError(i, "invalid hex word", repr(w))
        return cls(words)

    # ---------- access ----------

    def get(self, index: int) -> str:
        """Return the word at `index`; negative indices do not wrap around."""
        if index < 0 or index >= len(self._words):
            raise OutOfRangeError(index, len(self._words))
        return self._words[index]

    def as_slice(self) -> tuple[str, ...]:
        return self._words

    def uint_at(self, index: int, context: str, start: int = 0) -> int:
        """Read `word[start:]` at `index` as an unsigned integer."""
        word = self.get(index)
        if len(word) != WORD_LENGTH:
            raise MalformedHexError(index, context, f"expected {WORD_LENGTH} hex characters, got {len(word)}")
        try:
            return from_hex_string(word[start:])
        except ValueError as e:
            raise MalformedHexError(index, context, str(e)) from e

    # ---------- dynamic types ----------

    def value_of_dyn_type(self, start_index: int) -> str:
        """Resolve the dynamic value whose offset pointer sits at `start_index`.

        Returns the 0x-prefixed payload, trimmed to the declared byte length.
        """
        offset_bytes = self.uint_at(start_index, f"dynamic type at index {start_index} has unexpected offset")
        offset_index = offset_bytes // WORD_BYTES

        value_size_hex = (
            self.uint_at(offset_index, f"dynamic type at index {start_index} has unexpected data size") * 2
        )
        full_words, last_chunk_carry = divmod(value_size_hex, WORD_LENGTH)

        cursor = offset_index + 1
        parts = [HEX_PREFIX]
        for _ in range(full_words):
            parts.append(self.get(cursor))
            cursor += 1
        if last_chunk_carry:
            # right padding of the last word is not part of the value
            parts.append(self.get(cursor)[:last_chunk_carry])
        return "".join(parts)

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataChunks):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"DataChunks({list(self._words)!r})"
