"""
Interface for payment confirmers.

A confirmer only ever sees the client secret and publishable credentials,
never the server-side secret key.
"""

from abc import ABC, abstractmethod

from packages.checkout.models.domain.confirmation import (
    ConfirmationResult,
    PaymentElement,
)


class PaymentConfirmerInterface(ABC):
    """Abstract interface for confirming payment intents."""

    @abstractmethod
    async def confirm_payment(
        self,
        client_secret: str,
        element: PaymentElement,
        return_url: str,
    ) -> ConfirmationResult:
        """
        Confirm a payment intent.

        Declines and validation failures are returned as a FAILED result with
        the processor's message, not raised.

        Args:
            client_secret: Secret returned by the payment intent endpoint
            element: Payment instrument and billing details
            return_url: Where redirect-based methods send the customer back

        Returns:
            ConfirmationResult: status, error message or redirect URL
        """
        pass
