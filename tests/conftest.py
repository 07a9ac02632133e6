import typing as tp

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from data_storage.constants import MAX_LABEL_LENGTH


class StubDeriver:
    def __init__(self, address: Pubkey, bump: int = 254):
        self.address = address
        self.bump = bump
        self.calls: tp.List[tp.List[bytes]] = []

    def derive(self, seeds):
        self.calls.append(list(seeds))
        return self.address, self.bump


@pytest.fixture
def authority() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def payer() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def data_storage_address() -> Pubkey:
    return Pubkey(bytes([7] * 32))


@pytest.fixture
def stub_deriver(data_storage_address) -> StubDeriver:
    return StubDeriver(data_storage_address)


@pytest.fixture
def account_bytes():
    """Lay out account data the way the program writes it."""

    def build(
            authority: Pubkey,
            label: bytes = b"hello",
            last_updated: int = 0,
            bump: int = 255,
            is_initialized: bool = True,
            data: bytes = b"",
            data_length: tp.Optional[int] = None,
    ) -> bytes:
        if data_length is None:
            data_length = len(data)
        return (
            bytes(authority)
            + label.ljust(MAX_LABEL_LENGTH, b"\x00")
            + last_updated.to_bytes(8, "little", signed=True)
            + bytes([bump, int(is_initialized)])
            + data_length.to_bytes(2, "little")
            + data
        )

    return build
