"""Payment providers - payment intent creation and tax calculation."""

from packages.payments.providers.payment.interface import PaymentProviderInterface
from packages.payments.providers.payment.factory import get_payment_provider

__all__ = [
    "PaymentProviderInterface",
    "get_payment_provider",
]
