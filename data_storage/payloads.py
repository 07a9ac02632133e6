"""Instruction data for the data storage program.

Every payload starts with a one byte discriminator (see ``InstructionTag``).
Variable length fields are not length prefixed: the program takes
everything after the fixed part of the payload.
"""
import typing as tp
from dataclasses import dataclass

from construct import Bytes, Const, ConstructError, GreedyBytes, Int8ul, Struct

from data_storage.constants import MAX_DATA_LENGTH, MAX_LABEL_LENGTH
from data_storage.errors import EncodingPrecondition, LayoutError
from data_storage.layouts import decode_label
from data_storage.types import InstructionTag


CREATE_PAYLOAD_LAYOUT = Struct(
    "tag" / Const(InstructionTag.CREATE.value, Int8ul),
    "label" / Bytes(MAX_LABEL_LENGTH),
    "data" / GreedyBytes,
)

EDIT_PAYLOAD_LAYOUT = Struct(
    "tag" / Const(InstructionTag.EDIT.value, Int8ul),
    "new_data" / GreedyBytes,
)

CLOSE_PAYLOAD_LAYOUT = Struct(
    "tag" / Const(InstructionTag.CLOSE.value, Int8ul),
)


@dataclass(frozen=True)
class CreatePayload:
    label: str
    data: bytes


@dataclass(frozen=True)
class EditPayload:
    new_data: bytes


@dataclass(frozen=True)
class ClosePayload:
    pass


Payload = tp.Union[CreatePayload, EditPayload, ClosePayload]


def encode_label(label: str) -> bytes:
    """Return the label as it is stored on chain: utf-8, null padded to 30 bytes.

    Labels longer than 30 bytes are rejected rather than truncated, a cut in the
    middle of a multi-byte character would not pass the program's utf-8 check.
    """
    raw = label.encode("utf-8")
    if len(raw) > MAX_LABEL_LENGTH:
        raise EncodingPrecondition(f"Label is {len(raw)} bytes long, max {MAX_LABEL_LENGTH} bytes allowed")
    return raw.ljust(MAX_LABEL_LENGTH, b"\x00")


def _check_data_length(data: bytes) -> bytes:
    data = bytes(data)
    if len(data) > MAX_DATA_LENGTH:
        raise EncodingPrecondition(f"Data is {len(data)} bytes long, max {MAX_DATA_LENGTH} bytes allowed")
    return data


def encode_payload(payload: Payload) -> bytes:
    if isinstance(payload, CreatePayload):
        return CREATE_PAYLOAD_LAYOUT.build(
            dict(label=encode_label(payload.label), data=_check_data_length(payload.data))
        )
    if isinstance(payload, EditPayload):
        return EDIT_PAYLOAD_LAYOUT.build(dict(new_data=_check_data_length(payload.new_data)))
    if isinstance(payload, ClosePayload):
        return CLOSE_PAYLOAD_LAYOUT.build({})
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


def decode_payload(data: bytes) -> Payload:
    data = bytes(data)
    if not data:
        raise LayoutError("Instruction data is empty")
    try:
        tag = InstructionTag(data[0])
    except ValueError as exc:
        raise LayoutError(f"Unknown instruction discriminator: {data[0]}") from exc

    try:
        if tag == InstructionTag.CREATE:
            parsed = CREATE_PAYLOAD_LAYOUT.parse(data)
            return CreatePayload(label=decode_label(parsed.label), data=parsed.data)
        if tag == InstructionTag.EDIT:
            return EditPayload(new_data=EDIT_PAYLOAD_LAYOUT.parse(data).new_data)
        if tag == InstructionTag.CLOSE:
            return ClosePayload()
    except ConstructError as exc:
        raise LayoutError(f"Malformed {tag.name} instruction data") from exc
    raise LayoutError(f"Unhandled instruction discriminator: {tag}")
