"""
GelatoRelayPack - relay pack for the Gelato gasless relay.
"""
import asyncio
import logging
from typing import List, Optional, Union

from ..account import AccountAbstraction, ExecutableT
from ..config import RelayConfig
from ..exceptions import ConfigurationError
from ..models import MetaTransactionData, TaskStatus, TransactionOptions
from ..payment import Erc20Payment, SponsoredPayment, sponsored
from ..relay.http_transport import HttpRelayTransport
from ..relay.transport import RelayRequest, RelayTransport
from .base import RelayPack


class GelatoRelayPack(RelayPack[ExecutableT]):
    """
    Sends account transactions through the Gelato relay, fully sponsored.

    This pack handles:
    1. Building executable transactions with a freshly fetched nonce
    2. Routing them to the relay, bundling the account deployment when the
       account has not been deployed yet
    3. Forwarding task status queries

    It keeps no state between calls: deployment status, chain id, address and
    nonce are read from the account every time, and task status is always
    fetched from the relay. Errors from the account or the relay propagate
    unchanged.
    """

    def __init__(
        self,
        account: AccountAbstraction[ExecutableT],
        transport: Optional[RelayTransport] = None,
        api_key: Optional[str] = None,
        config: Optional[RelayConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the GelatoRelayPack

        Args:
            account: Account abstraction to build and encode transactions with
            transport: Relay client to use (takes precedence over api_key/config)
            api_key: Relay API key, used to build an HTTP transport
            config: Full relay settings, used to build an HTTP transport
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ConfigurationError: If no transport, config or api_key is provided
        """
        super().__init__(account, logger=logger)

        if transport is None:
            if config is None:
                if not api_key:
                    raise ConfigurationError("Either transport, config or api_key must be provided")
                config = RelayConfig(api_key=api_key)
            transport = HttpRelayTransport(config, logger=self.logger)

        self.transport = transport

    async def get_task_status(self, task_id: str) -> TaskStatus:
        """
        Get the status of a relayed transaction.

        One status query is made per call; to wait for a terminal state see
        ``relaykit_sdk.polling.wait_for_task``.

        Args:
            task_id: The task ID returned by the relay

        Returns:
            The status exactly as reported by the relay

        Raises:
            TaskNotFoundError: If the relay does not know the task
        """
        return await self.transport.query_status(task_id)

    async def create_transaction(
        self,
        transactions: List[MetaTransactionData],
        only_calls: bool = False
    ) -> ExecutableT:
        """
        Create a transaction designed to be executed using the Gelato relay.

        Args:
            transactions: The transactions batch
            only_calls: If True, the calls-only batch contract is used
                (MultiSendCallOnly for a Safe)

        Returns:
            Executable transaction built by the account abstraction
        """
        nonce = await self.account.get_nonce()
        self.logger.debug(f"Building relay transaction: {len(transactions)} call(s), nonce={nonce}")

        return await self.account.create_transaction(
            transactions=transactions,
            only_calls=only_calls,
            options=TransactionOptions(nonce=nonce)
        )

    async def send_transaction(
        self,
        target: str,
        encoded_transaction: str,
        chain_id: int,
        payment: Union[SponsoredPayment, Erc20Payment]
    ) -> str:
        """
        Send an encoded call to the relay with the given payment mode.

        Args:
            target: The target contract address
            encoded_transaction: The encoded transaction data
            chain_id: The chain ID
            payment: Who pays for gas

        Returns:
            The relay task ID
        """
        request = RelayRequest(chain_id=chain_id, to=target, data=encoded_transaction, payment=payment)
        return await self.transport.submit(request)

    async def send_sponsored_transaction(
        self,
        target: str,
        encoded_transaction: str,
        chain_id: int
    ) -> str:
        """
        Send a sponsored transaction to the Gelato relay.

        Args:
            target: The target contract address
            encoded_transaction: The encoded transaction data
            chain_id: The chain ID

        Returns:
            The relay task ID
        """
        return await self.send_transaction(target, encoded_transaction, chain_id, sponsored())

    async def execute_transaction(self, executable: ExecutableT) -> str:
        """
        Send the transaction to the Gelato relay for execution.

        If the account is not deployed yet, the account deployment and the
        transaction are wrapped into one batch, which is sent to the batch
        contract instead of the account address.

        Args:
            executable: The transaction to be executed

        Returns:
            The relay task ID
        """
        reads = [
            asyncio.ensure_future(self.account.is_deployed()),
            asyncio.ensure_future(self.account.get_chain_id()),
            asyncio.ensure_future(self.account.get_address()),
            asyncio.ensure_future(self.account.encode_transaction(executable)),
        ]
        try:
            is_deployed, chain_id, account_address, encoded_transaction = await asyncio.gather(*reads)
        except Exception:
            # The first failure aborts the call; reads still in flight are dropped
            for read in reads:
                read.cancel()
            raise

        if is_deployed:
            self.logger.debug(f"Account {account_address} is deployed, relaying directly")
            return await self.send_sponsored_transaction(account_address, encoded_transaction, chain_id)

        # Counterfactual account: it has no code to receive the call yet
        deployment_batch = await self.account.wrap_into_deployment_batch(executable)
        self.logger.debug(
            f"Account {account_address} is not deployed, relaying deployment batch "
            f"via {deployment_batch.to}"
        )
        return await self.send_sponsored_transaction(deployment_batch.to, deployment_batch.data, chain_id)
