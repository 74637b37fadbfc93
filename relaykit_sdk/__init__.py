"""
RelayKit SDK - submit smart-account transactions through gasless relays.
"""
from .version import __version__
from .account import AccountAbstraction
from .config import RelayConfig
from .exceptions import (
    RelayKitError, ConfigurationError, RelayError, RelayConnectionError,
    RelayTimeoutError, RelayResponseError, TaskNotFoundError
)
from .models import (
    OperationType, MetaTransactionData, TransactionOptions, SafeTransactionData,
    SafeTransaction, DeploymentBatch, TaskState, TaskReceipt, TaskStatus
)
from .payment import PaymentMode, SponsoredPayment, Erc20Payment, sponsored
from .packs import RelayPack, GelatoRelayPack
from .polling import wait_for_task
from .relay import RelayRequest, RelayTransport, HttpRelayTransport, StubTransport

__all__ = [
    "__version__",
    "AccountAbstraction",
    "RelayConfig",
    "RelayKitError",
    "ConfigurationError",
    "RelayError",
    "RelayConnectionError",
    "RelayTimeoutError",
    "RelayResponseError",
    "TaskNotFoundError",
    "OperationType",
    "MetaTransactionData",
    "TransactionOptions",
    "SafeTransactionData",
    "SafeTransaction",
    "DeploymentBatch",
    "TaskState",
    "TaskReceipt",
    "TaskStatus",
    "PaymentMode",
    "SponsoredPayment",
    "Erc20Payment",
    "sponsored",
    "RelayPack",
    "GelatoRelayPack",
    "wait_for_task",
    "RelayRequest",
    "RelayTransport",
    "HttpRelayTransport",
    "StubTransport",
]
