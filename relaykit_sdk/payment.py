"""
Payment modes accepted by the relay service.

A payment mode tells the relay who covers gas for a submitted call. Only the
sponsored mode is used by the send path today; other modes are declared here
so they can be selected without touching dispatch logic.
"""
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import Address


class SponsoredPayment(BaseModel):
    """Gas is fully covered by the relay sponsor; the account pays nothing"""
    type: Literal["sponsored"] = "sponsored"

    model_config = ConfigDict(frozen=True)


class Erc20Payment(BaseModel):
    """Gas is paid by the account in an ERC-20 token"""
    type: Literal["erc20"] = "erc20"
    token: Address

    model_config = ConfigDict(frozen=True)


PaymentMode = Annotated[Union[SponsoredPayment, Erc20Payment], Field(discriminator="type")]


def sponsored() -> SponsoredPayment:
    """Return the sponsored payment-mode marker"""
    return SponsoredPayment()


def payment_to_wire(payment: Union[SponsoredPayment, Erc20Payment]) -> Dict[str, Any]:
    """
    Convert a payment mode to the JSON shape sent to the relay service

    Args:
        payment: Payment mode to convert

    Returns:
        Plain dictionary, e.g. ``{"type": "sponsored"}``
    """
    return payment.model_dump(mode="json")
