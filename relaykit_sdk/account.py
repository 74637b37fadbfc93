"""
Account abstraction interface consumed by relay packs.
"""
from typing import List, Protocol, TypeVar

from .models import DeploymentBatch, MetaTransactionData, TransactionOptions

ExecutableT = TypeVar('ExecutableT')


class AccountAbstraction(Protocol[ExecutableT]):
    """
    Protocol for smart-contract accounts that can be driven by a relay pack.

    ``ExecutableT`` is whatever the account uses for a built, executable
    transaction (for a Safe, a ``SafeTransaction``). Relay packs never look
    inside it; they only hand it back to the account.
    """

    async def get_nonce(self) -> int:
        """Current on-chain nonce of the account"""
        ...

    async def create_transaction(
        self,
        *,
        transactions: List[MetaTransactionData],
        only_calls: bool,
        options: TransactionOptions
    ) -> ExecutableT:
        """
        Merge sub-transactions into one executable transaction

        ``only_calls`` restricts the batch to the calls-only execution path.
        """
        ...

    async def is_deployed(self) -> bool:
        """Whether the account contract has code on-chain"""
        ...

    async def get_chain_id(self) -> int:
        ...

    async def get_address(self) -> str:
        ...

    async def encode_transaction(self, executable: ExecutableT) -> str:
        """Hex call data that executes ``executable`` on the account contract"""
        ...

    async def wrap_into_deployment_batch(self, executable: ExecutableT) -> DeploymentBatch:
        """Batch the account's own deployment together with ``executable``"""
        ...
