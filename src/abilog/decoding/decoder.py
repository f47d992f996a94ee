"""Decode a whole argument list from one log's data section.

Each schema position `i` is decoded at chunk `i`; a `bytes` argument only
occupies its pointer word there, the payload lives further down the buffer.
Failures are per-argument; `DecodeConfig.on_error` decides whether the first
one aborts the log or is replaced by a placeholder.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from abilog.core.config import DEFAULT_CONFIG, DecodeConfig
from abilog.core.exceptions import DecodingError
from abilog.decoding.arguments import TopicArgument
from abilog.decoding.chunks import DataChunks

logger = logging.getLogger(__name__)


def decode_arguments(
    schema: Sequence[TopicArgument],
    chunks: DataChunks,
    *,
    config: DecodeConfig = DEFAULT_CONFIG,
) -> list[str | None]:
    """Decode every schema position; words past the schema are ignored."""
    out: list[str | None] = []
    for index, argument in enumerate(schema):
        try:
            out.append(argument.parse(index, chunks))
        except DecodingError as e:
            if config.on_error == "raise":
                raise
            logger.warning("argument %d (%s) replaced by placeholder: %s", index, argument.value, e)
            out.append(config.placeholder)
    logger.debug("decoded %d argument(s) from %d chunk(s)", len(out), len(chunks))
    return out


def decode_log_data(
    schema: Sequence[TopicArgument],
    data: str | bytes,
    *,
    config: DecodeConfig = DEFAULT_CONFIG,
) -> list[str | None]:
    """Split raw log data into chunks and decode it against `schema`."""
    chunks = DataChunks.from_data(data, validate=config.validate_words)
    return decode_arguments(schema, chunks, config=config)
