"""
Checkout enums - strongly typed enumerations for the checkout flow.
"""

from decimal import Decimal
from enum import Enum

ANNUAL_DISCOUNT = Decimal("0.9")
MONTHS_PER_YEAR = 12


class BillingCycle(str, Enum):
    """Subscription term; annual is billed up front at a discount."""

    MONTHLY = "monthly"
    ANNUAL = "annual"

    @property
    def months(self) -> int:
        return MONTHS_PER_YEAR if self is BillingCycle.ANNUAL else 1

    @property
    def discount_multiplier(self) -> Decimal:
        """Multiplier applied to the undiscounted total (10% off annual)."""
        return ANNUAL_DISCOUNT if self is BillingCycle.ANNUAL else Decimal("1")


class PaymentMethod(str, Enum):
    """How the customer pays."""

    CREDIT_CARD = "credit_card"  # Confirmed through the payment processor
    INVOICE = "invoice"  # Manual invoicing, order forwarded to sales


class CheckoutStep(str, Enum):
    """
    Checkout lifecycle.

    Flow: selecting_plan -> filling_details -> awaiting_payment_intent
          -> confirming_payment -> succeeded | failed

    failed is recoverable: resubmitting requests a new payment intent.
    """

    SELECTING_PLAN = "selecting_plan"
    FILLING_DETAILS = "filling_details"
    AWAITING_PAYMENT_INTENT = "awaiting_payment_intent"
    CONFIRMING_PAYMENT = "confirming_payment"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        return self in (CheckoutStep.SUCCEEDED, CheckoutStep.FAILED)


class PaymentStatus(str, Enum):
    """Submission indicator shown next to the submit control."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ConfirmationStatus(str, Enum):
    """Outcome reported by the processor for a confirmation attempt."""

    SUCCEEDED = "succeeded"
    PROCESSING = "processing"
    REQUIRES_ACTION = "requires_action"  # Redirect-based methods
    FAILED = "failed"
