"""
API schemas for payment intent operations.

Request bodies are deliberately lenient so the service can answer malformed
amounts with its own validation message instead of a schema error.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AddressPayload(BaseModel):
    """Address as sent by the checkout page."""

    model_config = ConfigDict(extra="ignore")

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class CreatePaymentIntentRequest(BaseModel):
    """Request to create a payment intent."""

    model_config = ConfigDict(extra="ignore")

    amount: Optional[Any] = None
    currency: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    address: Optional[AddressPayload] = None


class TaxResponse(BaseModel):
    """Tax figures returned to the browser."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    calculation_id: Optional[str] = None
    amount_exclusive: int
    amount_inclusive: int
    amount_total: int


class CreatePaymentIntentResponse(BaseModel):
    """Response with the intent's client secret."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_secret: str = Field(..., description="One-time secret for confirmation")
    tax: Optional[TaxResponse] = None


class StripeConfigResponse(BaseModel):
    """Client-side processor configuration."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    publishable_key: str
