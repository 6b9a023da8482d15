from packages.checkout.models.domain.enums import (
    BillingCycle,
    CheckoutStep,
    ConfirmationStatus,
    PaymentMethod,
    PaymentStatus,
)
from packages.checkout.models.domain.plans import Plan

__all__ = [
    "BillingCycle",
    "CheckoutStep",
    "ConfirmationStatus",
    "PaymentMethod",
    "PaymentStatus",
    "Plan",
]
