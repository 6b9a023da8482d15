"""
Factory for getting CRM provider instance.
"""

from common.core.config import settings
from common.core.exceptions import ConfigurationError
from common.core.otel_axiom_exporter import get_logger
from packages.contacts.providers.crm.brevo_crm import BrevoCrmProvider
from packages.contacts.providers.crm.interface import CrmProviderInterface

logger = get_logger(__name__)


def resolve_brevo_api_key() -> str:
    """
    Pick the Brevo key for the current environment.

    Production only accepts the server-side key. Other environments fall back
    to the public key so local forms keep working.
    """
    if settings.is_production:
        api_key = settings.brevo_api_key
    else:
        api_key = settings.brevo_api_key or settings.brevo_public_api_key
        if not settings.brevo_api_key and settings.brevo_public_api_key:
            logger.warning(
                "Using fallback BREVO_PUBLIC_API_KEY - set BREVO_API_KEY for production"
            )

    if not api_key:
        raise ConfigurationError("Missing BREVO_API_KEY environment variable")
    return api_key


def get_crm_provider() -> CrmProviderInterface:
    """
    Get CRM provider instance based on configuration.

    Raises:
        ConfigurationError: if no usable API key is configured
    """
    return BrevoCrmProvider(
        api_key=resolve_brevo_api_key(),
        api_url=settings.brevo_api_url,
        contact_list_id=settings.brevo_contact_list_id,
        waitlist_list_id=settings.brevo_waitlist_list_id,
        timeout=settings.brevo_timeout_seconds,
    )
