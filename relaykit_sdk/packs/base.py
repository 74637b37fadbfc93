"""
Base class for relay packs.

A relay pack binds one account abstraction to one relay provider. Each
provider ships its own pack; callers code against this interface.
"""
import logging
from abc import ABC, abstractmethod
from typing import Generic, List, Optional

from ..account import AccountAbstraction, ExecutableT
from ..models import MetaTransactionData


class RelayPack(ABC, Generic[ExecutableT]):
    """
    Abstract base class for relay packs.

    Attributes:
        account: The account abstraction transactions are built and sent for
        logger: Logger used for debug/info logging
    """

    def __init__(
        self,
        account: AccountAbstraction[ExecutableT],
        logger: Optional[logging.Logger] = None
    ):
        self.account = account
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    async def create_transaction(
        self,
        transactions: List[MetaTransactionData],
        only_calls: bool = False
    ) -> ExecutableT:
        """
        Build an executable transaction suitable for this relay.

        Args:
            transactions: Sub-transactions to batch
            only_calls: Restrict the batch to the calls-only execution path

        Returns:
            Executable transaction built by the account abstraction
        """
        pass

    @abstractmethod
    async def execute_transaction(self, executable: ExecutableT) -> str:
        """
        Hand an executable transaction to the relay.

        Args:
            executable: Transaction built by ``create_transaction``

        Returns:
            Relay task identifier
        """
        pass
