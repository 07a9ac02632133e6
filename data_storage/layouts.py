from construct import Bytes, ConstructError, Flag, GreedyBytes, Int8ul, Int16ul, Int64sl, Prefixed, Struct
from solders.pubkey import Pubkey

from data_storage.constants import ACCOUNT_HEADER_SIZE, MAX_LABEL_LENGTH
from data_storage.errors import LayoutError
from data_storage.types import DataStorageAccount


DATA_STORAGE_ACCOUNT_LAYOUT = Struct(
    "authority" / Bytes(32),
    # utf-8, null padded but not null terminated: a 30 byte label fills the slot
    "label" / Bytes(MAX_LABEL_LENGTH),
    "last_updated" / Int64sl,
    "canonical_bump" / Int8ul,
    "is_initialized" / Flag,
    "data" / Prefixed(Int16ul, GreedyBytes),
)


def decode_label(raw: bytes) -> str:
    try:
        return raw.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LayoutError("Label is not valid utf-8") from exc


def decode_data_storage_account(data: bytes) -> DataStorageAccount:
    data = bytes(data)
    if len(data) < ACCOUNT_HEADER_SIZE:
        raise LayoutError(f"Account data is {len(data)} bytes, at least {ACCOUNT_HEADER_SIZE} expected")

    try:
        parsed = DATA_STORAGE_ACCOUNT_LAYOUT.parse(data)
    except ConstructError as exc:
        declared = int.from_bytes(data[ACCOUNT_HEADER_SIZE - 2 : ACCOUNT_HEADER_SIZE], "little")
        raise LayoutError(
            f"Declared data length {declared} exceeds the {len(data) - ACCOUNT_HEADER_SIZE} bytes available"
        ) from exc

    return DataStorageAccount(
        authority=Pubkey.from_bytes(parsed.authority),
        label=decode_label(parsed.label),
        last_updated=parsed.last_updated,
        canonical_bump=parsed.canonical_bump,
        is_initialized=parsed.is_initialized,
        data=parsed.data,
    )
