"""
Transport layer for the relay service.

This module defines the interface every relay client implements, together
with the request model handed to it. The relay pack only ever talks to a
``RelayTransport``; how the request travels (HTTP, in-memory) is up to the
implementation.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from ..models import TaskStatus
from ..payment import PaymentMode, payment_to_wire

logger = logging.getLogger(__name__)


class RelayRequest(BaseModel):
    """
    A call the relay service should execute on the account's behalf.

    Addresses and data are carried exactly as the account abstraction
    produced them.
    """
    chain_id: int = Field(..., alias="chainId")
    to: str
    data: str
    payment: PaymentMode

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        """
        Convert to the JSON body the relay service expects.

        Returns:
            Dictionary with ``chainId``, ``to``, ``data`` and ``payment`` keys
        """
        return {
            "chainId": self.chain_id,
            "to": self.to,
            "data": self.data,
            "payment": payment_to_wire(self.payment),
        }


class RelayTransport(ABC):
    """
    Abstract base class for relay service clients.

    Implementations own their connection handling, authentication and any
    HTTP-level retry policy. Callers get back exactly what the relay reports.
    """

    @abstractmethod
    async def submit(self, request: RelayRequest) -> str:
        """
        Submit a call for relayed execution.

        Args:
            request: The call to relay

        Returns:
            Opaque task identifier assigned by the relay service

        Raises:
            RelayError: If the relay service rejects or cannot take the request
        """
        pass

    @abstractmethod
    async def query_status(self, task_id: str) -> TaskStatus:
        """
        Fetch the current status of a relay task.

        Args:
            task_id: Task identifier returned by ``submit``

        Returns:
            Task status as reported by the relay service

        Raises:
            TaskNotFoundError: If the relay service does not know the task
            RelayError: For other relay failures
        """
        pass

    def close(self) -> None:
        """Close any open connections or resources."""
        pass
