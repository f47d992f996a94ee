from __future__ import annotations

from .abi_events import AbiEvent, DecodedEventData, decode_event_data, get_event_schema, get_events_from_abi
from .core.config import DecodeConfig
from .core.constants import WORD_LENGTH
from .core.exceptions import DecodingError, MalformedHexError, OutOfRangeError, UnsupportedTypeError
from .decoding.arguments import TopicArgument
from .decoding.chunks import DataChunks
from .decoding.decoder import decode_arguments, decode_log_data

__all__ = [
    "DataChunks",
    "TopicArgument",
    "decode_arguments",
    "decode_log_data",
    "DecodeConfig",
    "WORD_LENGTH",
    "DecodingError",
    "MalformedHexError",
    "OutOfRangeError",
    "UnsupportedTypeError",
    "AbiEvent",
    "DecodedEventData",
    "decode_event_data",
    "get_event_schema",
    "get_events_from_abi",
]
