import os

from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID


DATA_STORAGE_PROGRAM_ID: Pubkey = Pubkey.from_string(
    os.environ.get("DATA_STORAGE_PROGRAM_ID") or "4Wp1FSPNRCVhaxrH5j1TvnpHgU3Smk5vCWJgeCmAhfaX"
)
SOLANA_URL = os.environ.get("SOLANA_URL", "http://solana:8899")
LOG_LEVEL = os.environ.get("DATA_STORAGE_LOG_LEVEL", "INFO").upper()

DATA_STORAGE_ACCOUNT_SEED = b"data_storage_account"

MAX_LABEL_LENGTH = 30
MAX_DATA_LENGTH = 0xFFFF

# authority(32) + label(30) + last_updated(8) + canonical_bump(1) + is_initialized(1) + data_length(2)
ACCOUNT_HEADER_SIZE = 32 + MAX_LABEL_LENGTH + 8 + 1 + 1 + 2

# An account whose authority is the system program can never be edited or closed.
IMMUTABLE_AUTHORITY: Pubkey = SYS_PROGRAM_ID
