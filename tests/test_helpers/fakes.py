"""
Test doubles for relay pack tests: mocked collaborators and a small in-memory
Safe-style account.
"""
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

from relaykit_sdk.models import (
    DeploymentBatch, MetaTransactionData, SafeTransaction, SafeTransactionData,
    TaskReceipt, TaskStatus, TransactionOptions
)
from relaykit_sdk.relay.transport import RelayTransport

# Test constants used throughout tests
CHAIN_ID = 1
ADDRESS = "0xa000000000000000000000000000000000000a11"
SAFE_ADDRESS = "0x5afe000000000000000000000000000000005afe"
MULTISEND_ADDRESS = "0x38869bf66a61cf6bdb996a6ae40d5853fd43b526"
TASK_ID = "task-id"
TX_HASH = "0x" + "ab" * 32
ENCODED_TRANSACTION_DATA = "0x6a761202" + "00" * 32
DEPLOYMENT_BATCH_DATA = "0x8d80ff0a" + "11" * 32
API_KEY = "api-key"

TASK_STATUS = TaskStatus(status=200, receipt=TaskReceipt(transaction_hash=TX_HASH))

SAFE_TRANSACTION = SafeTransaction(
    data=SafeTransactionData(to=ADDRESS, value="0", data="0x", nonce=0)
)

SAFE_DEPLOYMENT_BATCH = DeploymentBatch(to=MULTISEND_ADDRESS, value="0", data=DEPLOYMENT_BATCH_DATA)


def make_account(
    deployed: bool = True,
    nonce: int = 0,
    chain_id: int = CHAIN_ID,
    address: str = SAFE_ADDRESS,
    encoded: str = ENCODED_TRANSACTION_DATA,
    batch: DeploymentBatch = SAFE_DEPLOYMENT_BATCH
) -> MagicMock:
    """Create an account abstraction mock whose reads resolve to fixed values"""
    account = MagicMock(name="account")
    account.get_nonce = AsyncMock(return_value=nonce)
    account.create_transaction = AsyncMock(return_value=SAFE_TRANSACTION)
    account.is_deployed = AsyncMock(return_value=deployed)
    account.get_chain_id = AsyncMock(return_value=chain_id)
    account.get_address = AsyncMock(return_value=address)
    account.encode_transaction = AsyncMock(return_value=encoded)
    account.wrap_into_deployment_batch = AsyncMock(return_value=batch)
    return account


def make_transport(task_id: str = TASK_ID, status: TaskStatus = TASK_STATUS) -> MagicMock:
    """Create a relay transport mock"""
    transport = MagicMock(spec=RelayTransport)
    transport.submit = AsyncMock(return_value=task_id)
    transport.query_status = AsyncMock(return_value=status)
    return transport


class FakeSafeAccount:
    """
    In-memory Safe-style account.

    Starts counterfactual (not deployed) unless told otherwise. Encoding is
    deterministic so tests can predict what reaches the relay.
    """

    def __init__(
        self,
        address: str = SAFE_ADDRESS,
        chain_id: int = CHAIN_ID,
        deployed: bool = False,
        nonce: int = 0
    ):
        self.address = address
        self.chain_id = chain_id
        self.deployed = deployed
        self.nonce = nonce
        self.nonce_reads = 0
        self.batches_wrapped = 0
        self.last_only_calls: Optional[bool] = None

    async def get_nonce(self) -> int:
        self.nonce_reads += 1
        return self.nonce

    async def create_transaction(
        self,
        *,
        transactions: List[MetaTransactionData],
        only_calls: bool,
        options: TransactionOptions
    ) -> SafeTransaction:
        if not transactions:
            raise ValueError("Invalid empty array of transactions")
        self.last_only_calls = only_calls
        if len(transactions) == 1:
            tx = transactions[0]
            data = SafeTransactionData(to=tx.to, value=tx.value, data=tx.data, nonce=options.nonce)
        else:
            batch_data = "0x8d80ff0a" + "".join(tx.data[2:] for tx in transactions)
            data = SafeTransactionData(
                to=MULTISEND_ADDRESS, data=batch_data, operation=1, nonce=options.nonce
            )
        return SafeTransaction(data=data)

    async def is_deployed(self) -> bool:
        return self.deployed

    async def get_chain_id(self) -> int:
        return self.chain_id

    async def get_address(self) -> str:
        return self.address

    async def encode_transaction(self, executable: SafeTransaction) -> str:
        return "0x6a761202" + format(executable.data.nonce, "064x")

    async def wrap_into_deployment_batch(self, executable: SafeTransaction) -> DeploymentBatch:
        self.batches_wrapped += 1
        encoded = await self.encode_transaction(executable)
        return DeploymentBatch(to=MULTISEND_ADDRESS, data="0x8d80ff0a" + encoded[2:])
