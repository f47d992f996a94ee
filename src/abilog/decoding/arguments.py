"""Argument type tags and their per-word decoding rules."""

from __future__ import annotations

from enum import Enum

from abilog.core.constants import HEX_PREFIX
from abilog.core.exceptions import UnsupportedTypeError
from abilog.decoding.chunks import DataChunks

_ABI_ALIASES = {"uint": "uint256"}


class TopicArgument(Enum):
    """How one schema position was ABI-encoded (value is the ABI type name)."""

    Address = "address"
    Uint8 = "uint8"
    Uint256 = "uint256"
    Bytes32 = "bytes32"
    Bytes = "bytes"

    @classmethod
    def from_abi_type(cls, abi_type: str) -> TopicArgument:
        t = "".join(abi_type.split()).lower()
        t = _ABI_ALIASES.get(t, t)
        try:
            return cls(t)
        except ValueError as e:
            raise UnsupportedTypeError(f"no decoding rule for ABI type {abi_type!r}") from e

    @property
    def is_dynamic(self) -> bool:
        return self is TopicArgument.Bytes

    def parse(self, index: int, chunks: DataChunks) -> str:
        """Decode the argument whose (pointer) word sits at chunk `index`.

        Integers come back as decimal strings, everything else as 0x-hex.
        """
        match self:
            case TopicArgument.Address:
                return HEX_PREFIX + chunks.get(index)[24:64].lower()
            case TopicArgument.Uint8:
                return str(chunks.uint_at(index, "uint8 parse error", start=56))
            case TopicArgument.Uint256:
                return str(chunks.uint_at(index, "uint256 parse error"))
            case TopicArgument.Bytes32:
                return HEX_PREFIX + chunks.get(index)
            case TopicArgument.Bytes:
                return chunks.value_of_dyn_type(index)
        raise RuntimeError(f"Unsupported TopicArgument {self!r}")
