"""Domain models for payment confirmation."""

from typing import Any, Optional
from pydantic import BaseModel, Field

from packages.checkout.models.domain.enums import ConfirmationStatus


class PaymentElement(BaseModel):
    """
    Reference to the payment instrument collected by the processor's element.

    ``details`` is the type-specific payload (e.g. ``{"token": "tok_visa"}``
    for cards); billing details are attached at confirmation time.
    """

    payment_method_type: str = "card"
    details: dict[str, Any] = Field(default_factory=dict)
    billing_email: str = ""
    billing_name: str = ""  # Company name on the hosted form


class ConfirmationResult(BaseModel):
    """What the processor reported for one confirmation attempt."""

    status: ConfirmationStatus
    error_message: Optional[str] = None
    redirect_url: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status in (ConfirmationStatus.SUCCEEDED, ConfirmationStatus.PROCESSING)


class ConfirmationOutcome(BaseModel):
    """Result surfaced to the checkout form."""

    success: bool
    error_message: Optional[str] = None
    redirect_url: Optional[str] = None


class IssuedIntent(BaseModel):
    """Client secret held by the checkout flow, bound to the amount it was issued for."""

    client_secret: str
    amount_cents: int
    tax: Optional[dict[str, Any]] = None
