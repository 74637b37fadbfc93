"""
Pytest fixtures for the RelayKit SDK tests.
"""
import pytest

from relaykit_sdk.packs.gelato import GelatoRelayPack
from relaykit_sdk.relay._rate_limited_log import reset_rate_limits
from tests.test_helpers import make_account, make_transport


@pytest.fixture(autouse=True)
def _reset_rate_limited_log():
    """Make every test start with no suppressed log messages"""
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def account():
    """Account abstraction mock reporting a deployed account"""
    return make_account(deployed=True)


@pytest.fixture
def transport():
    """Relay transport mock returning TASK_ID / TASK_STATUS"""
    return make_transport()


@pytest.fixture
def relay_pack(account, transport):
    """GelatoRelayPack wired to the account and transport mocks"""
    return GelatoRelayPack(account, transport=transport)
