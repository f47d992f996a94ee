import pytest

from abilog.decoding.chunks import DataChunks

# data section of a SafeMultiSigTransaction log, cut after the first `bytes` payload
SAFE_TX_WORDS = [
    "00000000000000000000000026a7ecdb60d38b06fffeba426713aa191cffc2ed",
    "0000000000000000000000000000000000000000000000000000000000000000",
    "0000000000000000000000000000000000000000000000000000000000000160",  # offset of bytes
    "0000000000000000000000000000000000000000000000000000000000000000",
    "0000000000000000000000000000000000000000000000000000000000011ef3",
    "0000000000000000000000000000000000000000000000000000000000000000",
    "0000000000000000000000000000000000000000000000000000000000000000",
    "0000000000000000000000000000000000000000000000000000000000000000",
    "0000000000000000000000000000000000000000000000000000000000000000",
    "00000000000000000000000000000000000000000000000000000000000001e0",
    "0000000000000000000000000000000000000000000000000000000000000260",
    "0000000000000000000000000000000000000000000000000000000000000044",  # size of bytes
    "0d582f13000000000000000000000000be8c10dbf4c6148f9834c56c3331f819",
    "1f35555200000000000000000000000000000000000000000000000000000000",
    "0000000100000000000000000000000000000000000000000000000000000000",
]

SAFE_TX_BYTES = (
    "0x0d582f13000000000000000000000000be8c10dbf4c6148f9834c56c3331f819"
    "1f35555200000000000000000000000000000000000000000000000000000000"
    "00000001"
)


@pytest.fixture
def safe_tx_chunks() -> DataChunks:
    return DataChunks(SAFE_TX_WORDS)


@pytest.fixture
def safe_tx_data() -> str:
    return "0x" + "".join(SAFE_TX_WORDS)


@pytest.fixture
def safe_tx_words() -> list[str]:
    return list(SAFE_TX_WORDS)


@pytest.fixture
def safe_tx_bytes() -> str:
    return SAFE_TX_BYTES
