"""CRM providers - contact creation."""

from packages.contacts.providers.crm.interface import CrmProviderInterface
from packages.contacts.providers.crm.factory import get_crm_provider

__all__ = [
    "CrmProviderInterface",
    "get_crm_provider",
]
