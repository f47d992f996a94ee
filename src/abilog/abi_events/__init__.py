import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from eth_utils.abi import event_signature_to_log_topic
from pydantic import BaseModel

from abilog.core.config import DEFAULT_CONFIG, DecodeConfig
from abilog.decoding.arguments import TopicArgument
from abilog.decoding.decoder import decode_log_data


class AbiInput(BaseModel):
    indexed: bool = False
    internalType: str | None = None
    name: str = ""
    type: str


class AbiEvent(BaseModel):
    anonymous: bool = False
    inputs: Sequence[AbiInput]
    name: str
    type: Literal["event"] = "event"


@dataclass(slots=True)
class DecodedEventData:
    """Decoded non-indexed arguments of one log, keyed by input name."""

    name: str
    values: dict[str, str | None]


def get_event_signature(event: AbiEvent):
    return f"{event.name}({','.join(event_input.type for event_input in event.inputs)})"


def get_event_topic0(event: AbiEvent):
    return "0x" + event_signature_to_log_topic(get_event_signature(event)).hex()


def get_data_inputs(event: AbiEvent) -> list[AbiInput]:
    return [event_input for event_input in event.inputs if not event_input.indexed]


def get_data_input_names(event: AbiEvent) -> list[str]:
    """Output keys for the data inputs; unnamed or repeated names become `arg{i}`."""
    names: list[str] = []
    for i, event_input in enumerate(get_data_inputs(event)):
        name = event_input.name
        if not name or name in names:
            name = f"arg{i}"
        names.append(name)
    return names


def get_event_schema(event: AbiEvent) -> list[TopicArgument]:
    """Argument schema of the log `data` section (non-indexed inputs, in order)."""
    return [TopicArgument.from_abi_type(event_input.type) for event_input in get_data_inputs(event)]


def decode_event_data(
    event: AbiEvent,
    data: str | bytes,
    *,
    config: DecodeConfig = DEFAULT_CONFIG,
) -> DecodedEventData:
    values = decode_log_data(get_event_schema(event), data, config=config)
    return DecodedEventData(
        name=event.name,
        values=dict(zip(get_data_input_names(event), values)),
    )


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path


def _load_abi(abi: AbiSpec) -> AbiJson:
    if isinstance(abi, Path):
        return json.loads(abi.read_text())
    return abi


def get_events_from_abi(abi: AbiSpec) -> dict[str, AbiEvent]:
    abi = _load_abi(abi)
    return {entry["name"]: AbiEvent.model_validate(entry) for entry in abi if entry.get("type") == "event"}
