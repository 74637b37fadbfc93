"""
Data models for the RelayKit SDK.
"""
from enum import IntEnum
from typing import Annotated, Dict, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from .utils import validate_address, ensure_hex_data, ensure_wei_amount

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

Address = Annotated[str, AfterValidator(validate_address)]
HexData = Annotated[str, AfterValidator(ensure_hex_data)]
WeiAmount = Annotated[str, BeforeValidator(ensure_wei_amount)]


class OperationType(IntEnum):
    """Operation performed by a Safe sub-transaction"""
    CALL = 0
    DELEGATE_CALL = 1


class MetaTransactionData(BaseModel):
    """A single sub-transaction to be batched into one executable transaction"""
    to: Address
    value: WeiAmount = "0"
    data: HexData = "0x"
    operation: Optional[OperationType] = None


class TransactionOptions(BaseModel):
    """Options passed to the account abstraction when building a transaction"""
    nonce: int = Field(..., ge=0)


class SafeTransactionData(BaseModel):
    """Payload of a Safe transaction, using the Safe contracts' field names"""
    to: Address
    value: WeiAmount = "0"
    data: HexData = "0x"
    operation: OperationType = OperationType.CALL
    nonce: int = Field(..., ge=0)
    safe_tx_gas: WeiAmount = Field("0", alias="safeTxGas")
    base_gas: WeiAmount = Field("0", alias="baseGas")
    gas_price: WeiAmount = Field("0", alias="gasPrice")
    gas_token: Address = Field(ZERO_ADDRESS, alias="gasToken")
    refund_receiver: Address = Field(ZERO_ADDRESS, alias="refundReceiver")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SafeTransaction(BaseModel):
    """
    Reference shape of an executable transaction.

    The relay pack treats executables as opaque; this model is what a Safe-style
    account abstraction typically hands back from ``create_transaction``.
    """
    data: SafeTransactionData
    signatures: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class DeploymentBatch(BaseModel):
    """Account deployment and a transaction wrapped into one batch call"""
    to: str
    value: str = "0"
    data: str

    model_config = ConfigDict(frozen=True)


class TaskState(IntEnum):
    """Lifecycle states reported by the relay service"""
    PENDING = 100
    SUBMITTED = 110
    SUCCESS = 200
    FINALIZED = 210
    REJECTED = 400
    REVERTED = 500

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset({TaskState.FINALIZED, TaskState.REJECTED, TaskState.REVERTED})


class TaskReceipt(BaseModel):
    """On-chain receipt attached to a task once it has been mined"""
    transaction_hash: str = Field(..., alias="transactionHash")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TaskStatus(BaseModel):
    """
    Status of a relay task, as reported by the relay service.

    ``status`` holds the raw code. Codes outside ``TaskState`` are kept as-is,
    and fields beyond the ones modeled here (such as a revert ``message``)
    are kept as extra fields.
    """
    status: int
    receipt: Optional[TaskReceipt] = None

    model_config = ConfigDict(extra="allow")

    @property
    def state(self) -> Optional[TaskState]:
        """The known lifecycle state, or None for an unrecognized code"""
        try:
            return TaskState(self.status)
        except ValueError:
            return None

    @property
    def is_terminal(self) -> bool:
        state = self.state
        return state is not None and state.is_terminal

    @property
    def transaction_hash(self) -> Optional[str]:
        return self.receipt.transaction_hash if self.receipt else None
