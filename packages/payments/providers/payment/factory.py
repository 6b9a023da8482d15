"""
Factory for getting payment provider instance.
"""

from common.core.config import settings
from packages.payments.providers.payment.interface import PaymentProviderInterface
from packages.payments.providers.payment.stripe_payment import StripePaymentProvider


def get_payment_provider() -> PaymentProviderInterface:
    """
    Get payment provider instance based on configuration.

    Credentials are checked when the provider is used, not here, so a missing
    key surfaces as a configuration error on the request that needs it.

    Returns:
        PaymentProviderInterface: Configured payment provider
    """
    return StripePaymentProvider(
        secret_key=settings.stripe_secret_key,
        api_version=settings.stripe_api_version,
    )
