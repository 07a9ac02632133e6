import typing as tp

import solders.system_program as sp
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from data_storage.constants import DATA_STORAGE_PROGRAM_ID, IMMUTABLE_AUTHORITY, MAX_DATA_LENGTH
from data_storage.errors import EncodingPrecondition
from data_storage.logger import create_logger
from data_storage.payloads import ClosePayload, CreatePayload, EditPayload, encode_payload
from data_storage.types import EditVariant

LOGGER = create_logger(__name__)


def select_edit_variant(old_data_length: int, new_data_length: int) -> EditVariant:
    if new_data_length == old_data_length:
        return EditVariant.EQUAL
    if new_data_length < old_data_length:
        return EditVariant.SHRINK
    return EditVariant.GROW


def make_CreateDataStorageAccount(
        data_storage_account: Pubkey,
        authority: Pubkey,
        funding_account: Pubkey,
        label: str,
        data: bytes,
        program_id: Pubkey = DATA_STORAGE_PROGRAM_ID,
) -> Instruction:
    """Create and initialize a data storage account.

    ``data_storage_account`` must be the address derived from
    ``("data_storage_account", authority, label)``, it is not checked here.
    Passing the system program as ``authority`` creates an immutable account,
    in that case the authority is not required to sign.
    """
    payload = encode_payload(CreatePayload(label=label, data=data))
    authority_signs = authority != IMMUTABLE_AUTHORITY

    accounts = [
        AccountMeta(pubkey=data_storage_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=authority, is_signer=authority_signs, is_writable=False),
        AccountMeta(pubkey=funding_account, is_signer=True, is_writable=True),
        AccountMeta(pubkey=sp.ID, is_signer=False, is_writable=False),
    ]
    LOGGER.debug("CreateDataStorageAccount %s label=%r data_len=%d", data_storage_account, label, len(data))
    return Instruction(program_id=program_id, data=payload, accounts=accounts)


def make_EditDataStorageAccount(
        data_storage_account: Pubkey,
        authority: Pubkey,
        new_data: bytes,
        old_data_length: int,
        rent_receiver: tp.Optional[Pubkey] = None,
        funding_account: tp.Optional[Pubkey] = None,
        program_id: Pubkey = DATA_STORAGE_PROGRAM_ID,
) -> Instruction:
    """Replace the data of an existing account.

    The account list depends on how the new data length compares to
    ``old_data_length``, the length currently stored on chain:
    shrinking refunds rent to ``rent_receiver``, growing takes it from
    ``funding_account``. A stale ``old_data_length`` produces an instruction
    the program rejects.
    """
    payload = encode_payload(EditPayload(new_data=new_data))
    if not 0 <= old_data_length <= MAX_DATA_LENGTH:
        raise EncodingPrecondition(f"old_data_length {old_data_length} is outside 0..{MAX_DATA_LENGTH}")
    variant = select_edit_variant(old_data_length, len(new_data))

    accounts = [
        AccountMeta(pubkey=data_storage_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=authority, is_signer=True, is_writable=False),
    ]
    if variant == EditVariant.SHRINK:
        if rent_receiver is None:
            raise ValueError("rent_receiver is required when the new data is shorter than the old data")
        accounts.append(AccountMeta(pubkey=rent_receiver, is_signer=False, is_writable=True))
    elif variant == EditVariant.GROW:
        if funding_account is None:
            raise ValueError("funding_account is required when the new data is longer than the old data")
        accounts.append(AccountMeta(pubkey=funding_account, is_signer=True, is_writable=True))
        accounts.append(AccountMeta(pubkey=sp.ID, is_signer=False, is_writable=False))

    LOGGER.debug(
        "EditDataStorageAccount %s variant=%s old_len=%d new_len=%d",
        data_storage_account,
        variant.value,
        old_data_length,
        len(new_data),
    )
    return Instruction(program_id=program_id, data=payload, accounts=accounts)


def make_CloseDataStorageAccount(
        data_storage_account: Pubkey,
        authority: Pubkey,
        rent_receiver: Pubkey,
        program_id: Pubkey = DATA_STORAGE_PROGRAM_ID,
) -> Instruction:
    accounts = [
        AccountMeta(pubkey=data_storage_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=authority, is_signer=True, is_writable=False),
        AccountMeta(pubkey=rent_receiver, is_signer=False, is_writable=True),
    ]
    LOGGER.debug("CloseDataStorageAccount %s rent_receiver=%s", data_storage_account, rent_receiver)
    return Instruction(program_id=program_id, data=encode_payload(ClosePayload()), accounts=accounts)
