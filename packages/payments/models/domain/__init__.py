from packages.payments.models.domain.payment_intent import (
    BillingAddress,
    PaymentIntentRequest,
    PaymentIntentResult,
    TaxContext,
    TaxDetails,
)

__all__ = [
    "BillingAddress",
    "PaymentIntentRequest",
    "PaymentIntentResult",
    "TaxContext",
    "TaxDetails",
]
