"""Domain models for payment intent creation."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SHIPPING_NAME = "Customer"


class BillingAddress(BaseModel):
    """Postal address used for jurisdiction-aware tax."""

    model_config = ConfigDict(frozen=True)

    line1: str = ""
    line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str

    def to_stripe(self) -> dict[str, str]:
        return {
            "line1": self.line1,
            "line2": self.line2,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
        }

    @staticmethod
    def blank_stripe_address() -> dict[str, str]:
        """Placeholder address completed later by the client address widget."""
        return {
            "line1": "",
            "line2": "",
            "city": "",
            "state": "",
            "postal_code": "",
            "country": "",
        }


class TaxContext(BaseModel):
    """Present on a request only when tax must be calculated."""

    model_config = ConfigDict(frozen=True)

    address: BillingAddress


class PaymentIntentRequest(BaseModel):
    """
    A validated request to create a payment intent.

    Either carries a TaxContext (automatic tax enabled) or does not.
    """

    model_config = ConfigDict(frozen=True)

    amount_cents: int = Field(..., gt=0)
    currency: str = "usd"
    metadata: dict[str, str] = Field(default_factory=dict)
    tax_context: Optional[TaxContext] = None

    @property
    def requires_tax(self) -> bool:
        return self.tax_context is not None

    @property
    def shipping_name(self) -> str:
        return self.metadata.get("customer_name") or DEFAULT_SHIPPING_NAME


class TaxDetails(BaseModel):
    """Tax computed by the processor for a request with a TaxContext."""

    calculation_id: Optional[str] = None
    amount_exclusive: int = 0
    amount_inclusive: int = 0
    amount_total: int


class PaymentIntentResult(BaseModel):
    """Reference to a processor-side intent plus the computed tax."""

    intent_id: str
    client_secret: str
    tax: Optional[TaxDetails] = None
