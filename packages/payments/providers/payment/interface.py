"""
Interface for payment providers.

Abstracts payment intent creation away from a specific processor.
"""

from abc import ABC, abstractmethod
from typing import Optional

from packages.payments.models.domain.payment_intent import (
    PaymentIntentRequest,
    PaymentIntentResult,
    TaxDetails,
)


class PaymentProviderInterface(ABC):
    """Abstract interface for payment providers."""

    @abstractmethod
    async def calculate_tax(self, request: PaymentIntentRequest) -> TaxDetails:
        """
        Calculate tax for a request that carries a TaxContext.

        Args:
            request: Validated payment intent request with an address

        Returns:
            TaxDetails: Tax computed for the request's jurisdiction
        """
        pass

    @abstractmethod
    async def create_payment_intent(
        self,
        request: PaymentIntentRequest,
        tax: Optional[TaxDetails] = None,
    ) -> PaymentIntentResult:
        """
        Create a new processor-side payment intent.

        Not idempotent: every call creates a distinct intent.

        Args:
            request: Validated payment intent request
            tax: Tax previously calculated for the request, if any

        Returns:
            PaymentIntentResult: Intent id, client secret and tax
        """
        pass
