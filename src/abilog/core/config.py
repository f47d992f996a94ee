from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ErrorPolicy = Literal["raise", "placeholder"]


@dataclass(frozen=True)
class DecodeConfig:
    """Configuration for decoding a full argument list."""

    on_error: ErrorPolicy = "raise"
    placeholder: str | None = None  # substituted value when on_error == "placeholder"
    validate_words: bool = True  # eager hex check when building chunks from raw data

    def __post_init__(self) -> None:
        if self.on_error not in ("raise", "placeholder"):
            raise ValueError(f"on_error must be 'raise' or 'placeholder', got {self.on_error!r}")


DEFAULT_CONFIG = DecodeConfig()
