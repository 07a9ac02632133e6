import typing as tp

from solders.pubkey import Pubkey

from data_storage.constants import DATA_STORAGE_ACCOUNT_SEED, DATA_STORAGE_PROGRAM_ID
from data_storage.payloads import encode_label


class AddressDeriver(tp.Protocol):
    def derive(self, seeds: tp.Sequence[bytes]) -> tp.Tuple[Pubkey, int]:
        ...


class ProgramAddressDeriver:
    """Finds the program address and canonical bump with solders (bump searched from 255 down)."""

    def __init__(self, program_id: Pubkey = DATA_STORAGE_PROGRAM_ID):
        self.program_id = program_id

    def derive(self, seeds: tp.Sequence[bytes]) -> tp.Tuple[Pubkey, int]:
        return Pubkey.find_program_address(list(seeds), self.program_id)


def data_storage_seeds(authority: Pubkey, label: str) -> tp.List[bytes]:
    # The program derives from the whole 30 byte label slot, padding included.
    return [DATA_STORAGE_ACCOUNT_SEED, bytes(authority), encode_label(label)]


def find_data_storage_address(
    authority: Pubkey,
    label: str,
    deriver: tp.Optional[AddressDeriver] = None,
) -> tp.Tuple[Pubkey, int]:
    if deriver is None:
        deriver = ProgramAddressDeriver()
    return deriver.derive(data_storage_seeds(authority, label))
