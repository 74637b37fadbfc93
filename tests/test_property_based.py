"""
Property-based tests for relay routing.

These tests verify that routing properties hold across many random account
states and payloads.
"""
import asyncio

from hypothesis import given, settings, strategies as st

from relaykit_sdk.models import DeploymentBatch, TaskStatus, TransactionOptions
from relaykit_sdk.packs.gelato import GelatoRelayPack
from relaykit_sdk.payment import SponsoredPayment
from tests.test_helpers import make_account, make_transport

address_strategy = st.binary(min_size=20, max_size=20).map(lambda b: "0x" + b.hex())
hex_data_strategy = st.binary(max_size=256).map(lambda b: "0x" + b.hex())
chain_id_strategy = st.integers(min_value=1, max_value=2**63 - 1)


@settings(max_examples=50)
@given(
    deployed=st.booleans(),
    chain_id=chain_id_strategy,
    account_address=address_strategy,
    encoded=hex_data_strategy,
    batch_to=address_strategy,
    batch_data=hex_data_strategy,
)
def test_routing_depends_only_on_deployment(deployed, chain_id, account_address, encoded, batch_to, batch_data):
    """
    Deployed accounts get their own encoding at their own address; undeployed
    ones get the deployment batch at the batch target. Nothing else matters.
    """
    account = make_account(
        deployed=deployed,
        chain_id=chain_id,
        address=account_address,
        encoded=encoded,
        batch=DeploymentBatch(to=batch_to, data=batch_data),
    )
    transport = make_transport()
    pack = GelatoRelayPack(account, transport=transport)

    asyncio.run(pack.execute_transaction(object()))

    request = transport.submit.await_args.args[0]
    assert request.chain_id == chain_id
    assert request.payment == SponsoredPayment()
    if deployed:
        assert (request.to, request.data) == (account_address, encoded)
        account.wrap_into_deployment_batch.assert_not_awaited()
    else:
        assert (request.to, request.data) == (batch_to, batch_data)
        account.wrap_into_deployment_batch.assert_awaited_once()


@settings(max_examples=50)
@given(target=address_strategy, data=hex_data_strategy, chain_id=chain_id_strategy)
def test_sponsored_payment_regardless_of_content(target, data, chain_id):
    transport = make_transport()
    pack = GelatoRelayPack(make_account(), transport=transport)

    asyncio.run(pack.send_sponsored_transaction(target, data, chain_id))

    wire = transport.submit.await_args.args[0].to_wire()
    assert wire == {"chainId": chain_id, "to": target, "data": data, "payment": {"type": "sponsored"}}


@settings(max_examples=50)
@given(nonce=st.integers(min_value=0, max_value=2**64), only_calls=st.booleans())
def test_built_transaction_carries_fetched_nonce(nonce, only_calls):
    account = make_account(nonce=nonce)
    pack = GelatoRelayPack(account, transport=make_transport())

    asyncio.run(pack.create_transaction([], only_calls=only_calls))

    kwargs = account.create_transaction.await_args.kwargs
    assert kwargs["options"] == TransactionOptions(nonce=nonce)
    assert kwargs["only_calls"] is only_calls


@settings(max_examples=50)
@given(status=st.integers(min_value=0, max_value=999))
def test_status_is_forwarded_verbatim(status):
    reported = TaskStatus(status=status)
    transport = make_transport(status=reported)
    pack = GelatoRelayPack(make_account(), transport=transport)

    assert asyncio.run(pack.get_task_status("task-id")) == reported
