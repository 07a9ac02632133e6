import enum
from dataclasses import dataclass

from solders.pubkey import Pubkey

from data_storage.constants import IMMUTABLE_AUTHORITY


@dataclass(frozen=True)
class DataStorageAccount:
    authority: Pubkey
    label: str
    last_updated: int
    canonical_bump: int
    is_initialized: bool
    data: bytes

    @property
    def is_immutable(self) -> bool:
        return self.authority == IMMUTABLE_AUTHORITY

    @property
    def was_edited(self) -> bool:
        return self.last_updated != 0


class InstructionTag(enum.IntEnum):
    CREATE = 0
    EDIT = 1
    CLOSE = 2


class EditVariant(enum.Enum):
    EQUAL = "equal"
    SHRINK = "shrink"
    GROW = "grow"
