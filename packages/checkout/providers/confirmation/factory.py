"""
Factory for getting a payment confirmer.
"""

from common.core.config import settings
from packages.checkout.providers.confirmation.interface import PaymentConfirmerInterface
from packages.checkout.providers.confirmation.stripe_confirmer import (
    StripePaymentConfirmer,
)


def get_payment_confirmer() -> PaymentConfirmerInterface:
    """
    Build the confirmer once at application start and pass it to each flow.

    The publishable key is checked on use, so a missing key fails the
    confirmation that needs it rather than startup.
    """
    return StripePaymentConfirmer(
        publishable_key=settings.stripe_publishable_key,
        api_version=settings.stripe_api_version,
    )
