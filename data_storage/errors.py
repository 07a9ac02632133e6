import enum
import re
import typing as tp


class DataStorageClientError(Exception):
    pass


class LayoutError(DataStorageClientError):
    """Bytes read back from the ledger (or from an instruction) do not match the expected layout."""


class EncodingPrecondition(DataStorageClientError, ValueError):
    """Input can not be represented in the program's wire format."""


class AccountOwnerError(DataStorageClientError):
    def __init__(self, address, owner, program_id):
        super().__init__(f"Account {address} is owned by {owner}, expected {program_id}")
        self.address = address
        self.owner = owner
        self.program_id = program_id


class DataStorageError(enum.IntEnum):
    IMMUTABLE_DATA_STORAGE = 70
    FAILED_TO_FIND_PROGRAM_ADDRESS = 71
    INVALID_LABEL = 72
    INVALID_DATA = 73

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    DataStorageError.IMMUTABLE_DATA_STORAGE: "immutable data storage account.",
    DataStorageError.FAILED_TO_FIND_PROGRAM_ADDRESS: "find_program_address failed!",
    DataStorageError.INVALID_LABEL: "invalid account-label (invalid utf-8)",
    DataStorageError.INVALID_DATA: "invalid data",
}

_CUSTOM_ERROR_RE = re.compile(r"custom program error: (0x[0-9a-fA-F]+|\d+)")


def parse_custom_error(message: str) -> tp.Optional[DataStorageError]:
    match = _CUSTOM_ERROR_RE.search(message)
    if match is None:
        return None
    code = int(match.group(1), 0)
    try:
        return DataStorageError(code)
    except ValueError:
        return None
