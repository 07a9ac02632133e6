import typing as tp

from solana.rpc.api import Client
from solana.rpc.commitment import Commitment, Confirmed
from solders.pubkey import Pubkey

from data_storage.address import AddressDeriver, ProgramAddressDeriver, find_data_storage_address
from data_storage.constants import DATA_STORAGE_PROGRAM_ID, SOLANA_URL
from data_storage.errors import AccountOwnerError
from data_storage.layouts import decode_data_storage_account
from data_storage.logger import create_logger
from data_storage.types import DataStorageAccount

LOGGER = create_logger(__name__)


class DataStorageClient(Client):
    def __init__(
            self,
            endpoint: str = SOLANA_URL,
            program_id: Pubkey = DATA_STORAGE_PROGRAM_ID,
            deriver: tp.Optional[AddressDeriver] = None,
            commitment: Commitment = Confirmed,
            **kwargs,
    ):
        super().__init__(endpoint, commitment=commitment, **kwargs)
        self.program_id = program_id
        self.deriver = deriver or ProgramAddressDeriver(program_id)

    def get_data_storage_account(self, address: Pubkey) -> tp.Optional[DataStorageAccount]:
        """Read an account back, ``None`` means it was never created or has been closed."""
        info = self.get_account_info(address).value
        if info is None:
            LOGGER.info("Data storage account %s not found", address)
            return None
        if info.owner != self.program_id:
            raise AccountOwnerError(address, info.owner, self.program_id)

        account = decode_data_storage_account(info.data)
        if not account.is_initialized:
            LOGGER.info("Data storage account %s is closed", address)
            return None
        LOGGER.debug("Data storage account %s: label=%r data_len=%d", address, account.label, len(account.data))
        return account

    def find_data_storage_account(
            self, authority: Pubkey, label: str
    ) -> tp.Tuple[Pubkey, tp.Optional[DataStorageAccount]]:
        address, _ = find_data_storage_address(authority, label, self.deriver)
        return address, self.get_data_storage_account(address)
