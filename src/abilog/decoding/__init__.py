"""ABI log data decoding.

This package provides:
- `DataChunks`: word-chunked view of a log's data section with dynamic value resolution
- `TopicArgument`: closed set of argument types and their decoding rules
- `decode_arguments` / `decode_log_data`: whole-schema decoding with error policy
- `from_hex_string`: hex to unsigned integer primitive
"""

from abilog.decoding.arguments import TopicArgument
from abilog.decoding.chunks import DataChunks
from abilog.decoding.decoder import decode_arguments, decode_log_data
from abilog.decoding.numbers import from_hex_string

__all__ = [
    "DataChunks",
    "TopicArgument",
    "decode_arguments",
    "decode_log_data",
    "from_hex_string",
]
