"""Domain models for the checkout form."""

from typing import Optional
from pydantic import BaseModel

from packages.checkout.models.domain.confirmation import IssuedIntent
from packages.checkout.models.domain.enums import (
    BillingCycle,
    CheckoutStep,
    PaymentMethod,
    PaymentStatus,
)
from packages.checkout.models.domain.plans import Plan
from packages.checkout.pricing import DEFAULT_EMPLOYEE_COUNT

CONTACT_FIELDS = ("first_name", "last_name", "email", "company_name", "phone")
ADDRESS_FIELDS = ("address", "city", "state", "zip")


class CustomerDetails(BaseModel):
    """Customer fields entered on the checkout form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    company_name: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "US"

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def has_address(self) -> bool:
        return all(getattr(self, field).strip() for field in ADDRESS_FIELDS)


class CheckoutState(BaseModel):
    """
    Mutable state of one checkout visit, owned by the browser session.

    The amount is not stored here; it is derived from the plan, seats and
    billing cycle every time it is read.
    """

    step: CheckoutStep = CheckoutStep.SELECTING_PLAN
    selected_plan: Optional[Plan] = None
    employee_count: int = DEFAULT_EMPLOYEE_COUNT
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    customer: CustomerDetails = CustomerDetails()
    payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD
    payment_status: PaymentStatus = PaymentStatus.IDLE
    error_message: Optional[str] = None
    intent: Optional[IssuedIntent] = None
    redirect_url: Optional[str] = None
