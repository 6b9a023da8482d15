"""Payment confirmers - confirm an intent with its client secret."""

from packages.checkout.providers.confirmation.interface import PaymentConfirmerInterface
from packages.checkout.providers.confirmation.factory import get_payment_confirmer

__all__ = [
    "PaymentConfirmerInterface",
    "get_payment_confirmer",
]
