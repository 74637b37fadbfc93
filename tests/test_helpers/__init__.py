"""
Shared helpers for RelayKit SDK tests.
"""
from .fakes import (
    API_KEY, ADDRESS, CHAIN_ID, DEPLOYMENT_BATCH_DATA, ENCODED_TRANSACTION_DATA,
    MULTISEND_ADDRESS, SAFE_ADDRESS, SAFE_DEPLOYMENT_BATCH, SAFE_TRANSACTION,
    TASK_ID, TASK_STATUS, TX_HASH, FakeSafeAccount, make_account, make_transport
)
