"""Events the program writes to the transaction log.

Each successful instruction logs one line in Rust debug format, e.g.::

    Program log: DataStorageAccountClosed { data_storage_account: 5Zx..., authority_account: 9ab... }
"""
import re
import typing as tp

from pydantic import BaseModel, ConfigDict, field_validator
from solders.pubkey import Pubkey

LOG_PREFIX = "Program log: "

_EVENT_RE = re.compile(r"^(?P<name>\w+) \{ (?P<body>.*) \}$")
_FIELD_RE = re.compile(r"(\w+): (\[[^\]]*\]|[^,\s]+)")


class DataStorageEvent(BaseModel):
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True, frozen=True)

    data_storage_account: Pubkey
    authority_account: Pubkey

    @field_validator("data_storage_account", "authority_account", mode="before")
    @classmethod
    def parse_pubkey(cls, value):
        if isinstance(value, str):
            return Pubkey.from_string(value)
        return value


class NewDataStorageAccountCreated(DataStorageEvent):
    account_label: str

    @field_validator("account_label", mode="before")
    @classmethod
    def parse_label(cls, value):
        if isinstance(value, str) and value.startswith("["):
            raw = bytes(int(item) for item in value.strip("[]").split(","))
            return raw.rstrip(b"\x00").decode("utf-8")
        return value


class DataStorageAccountEdited(DataStorageEvent):
    old_data_len: int
    new_data_len: int


class DataStorageAccountClosed(DataStorageEvent):
    pass


Event = tp.Union[NewDataStorageAccountCreated, DataStorageAccountEdited, DataStorageAccountClosed]

EVENT_TYPES: tp.Dict[str, tp.Type[DataStorageEvent]] = {
    "NewDataStorageAccountCreated": NewDataStorageAccountCreated,
    "DataStorageAccountEdited": DataStorageAccountEdited,
    "DataStorageAccountClosed": DataStorageAccountClosed,
}


def decode_event(log_line: str) -> tp.Optional[Event]:
    if not log_line.startswith(LOG_PREFIX):
        return None
    match = _EVENT_RE.match(log_line[len(LOG_PREFIX):].strip())
    if match is None or match.group("name") not in EVENT_TYPES:
        return None
    fields = dict(_FIELD_RE.findall(match.group("body")))
    return EVENT_TYPES[match.group("name")](**fields)


def decode_events(log_messages: tp.Iterable[str]) -> tp.List[Event]:
    events = []
    for line in log_messages:
        event = decode_event(line)
        if event is not None:
            events.append(event)
    return events
