#!/usr/bin/env python3
"""
Example of relaying a sponsored transaction with the RelayKit SDK.

The account abstraction below is an in-memory placeholder; plug in your own
smart-account implementation (anything providing the AccountAbstraction
methods) to relay real transactions.
"""
import asyncio
import logging
import os

from relaykit_sdk import (
    DeploymentBatch, GelatoRelayPack, MetaTransactionData, RelayConfig, RelayKitError,
    SafeTransaction, SafeTransactionData, StubTransport, TaskState, wait_for_task
)

MULTISEND_ADDRESS = "0x38869bf66a61cf6bdb996a6ae40d5853fd43b526"


class DemoAccount:
    """A counterfactual account that always reports nonce 0"""

    address = "0x5afe000000000000000000000000000000005afe"

    async def get_nonce(self):
        return 0

    async def create_transaction(self, *, transactions, only_calls, options):
        tx = transactions[0]
        return SafeTransaction(data=SafeTransactionData(to=tx.to, data=tx.data, nonce=options.nonce))

    async def is_deployed(self):
        return False

    async def get_chain_id(self):
        return 11155111  # Sepolia

    async def get_address(self):
        return self.address

    async def encode_transaction(self, executable):
        return "0x6a761202" + format(executable.data.nonce, "064x")

    async def wrap_into_deployment_batch(self, executable):
        encoded = await self.encode_transaction(executable)
        return DeploymentBatch(to=MULTISEND_ADDRESS, data="0x8d80ff0a" + encoded[2:])


async def main():
    """
    Demonstrate basic usage of the GelatoRelayPack.

    This example shows how to:
    1. Build a relay transaction from sub-transactions
    2. Relay it (bundling the account deployment if needed)
    3. Wait for the relay task to settle
    """
    logging.basicConfig(level=logging.DEBUG)

    # Use the real relay when an API key is configured, otherwise stay in memory
    if os.environ.get("RELAYKIT_API_KEY"):
        pack = GelatoRelayPack(DemoAccount(), config=RelayConfig.from_env())
        stub = None
    else:
        stub = StubTransport()
        pack = GelatoRelayPack(DemoAccount(), transport=stub)

    try:
        executable = await pack.create_transaction([
            MetaTransactionData(to="0xa000000000000000000000000000000000000a11", data="0x")
        ])
        task_id = await pack.execute_transaction(executable)
        print(f"Relay task created: {task_id}")

        if stub is not None:
            stub.set_status(task_id, TaskState.FINALIZED, tx_hash="0x" + "ab" * 32)

        status = await wait_for_task(pack, task_id, interval=2, timeout=300)
        print(f"Task settled with status {status.status}")
        if status.transaction_hash:
            print(f"Transaction hash: {status.transaction_hash}")

    except RelayKitError as e:
        print(f"Relay failed: {str(e)}")
    finally:
        pack.transport.close()


if __name__ == "__main__":
    asyncio.run(main())
