"""
API schemas for plan listing and price quotes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from packages.checkout.models.domain.enums import BillingCycle


class PlanResponse(BaseModel):
    """A plan as shown on the pricing page."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    price: str
    price_cents: int
    description: str
    features: list[str]


class PlansResponse(BaseModel):
    """Response model for plans endpoint."""

    plans: list[PlanResponse]


class QuoteResponse(BaseModel):
    """Amount the checkout page will request an intent for."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    plan: str
    employee_count: int
    billing_cycle: BillingCycle
    amount_cents: int
    amount_formatted: str
