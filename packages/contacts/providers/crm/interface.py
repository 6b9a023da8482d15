"""
Interface for CRM providers.
"""

from abc import ABC, abstractmethod

from packages.contacts.models.domain.contact import ContactResult, ContactSubmission


class CrmProviderInterface(ABC):
    """Abstract interface for CRM providers."""

    @abstractmethod
    async def create_contact(self, contact: ContactSubmission) -> ContactResult:
        """
        Create a contact in the CRM.

        Args:
            contact: Validated contact submission

        Returns:
            ContactResult: success flag and optional user-facing message

        Raises:
            UpstreamError: when the CRM rejects the request
        """
        pass
