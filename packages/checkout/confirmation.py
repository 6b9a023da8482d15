"""
Payment confirmation adapter.

Wraps one client secret and one payment element. ``confirm()`` asks the
processor to confirm the intent, redirecting only when the payment method
requires it, and reports success or the processor's message back to the form.
"""

import inspect
from typing import Any, Awaitable, Callable, Optional, Union

from common.core.config import settings
from common.core.exceptions import CheckoutStateError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.checkout.models.domain.confirmation import (
    ConfirmationOutcome,
    PaymentElement,
)
from packages.checkout.providers.confirmation.interface import PaymentConfirmerInterface

logger = get_logger(__name__)

MISSING_BILLING_DETAILS_MESSAGE = "Email and Company Name are required"

SuccessCallback = Callable[[], Union[None, Awaitable[Any]]]


class PaymentConfirmationAdapter:
    """Confirms a single payment intent on behalf of the checkout form."""

    def __init__(
        self,
        confirmer: PaymentConfirmerInterface,
        client_secret: str,
        element: PaymentElement,
        on_success: SuccessCallback,
        return_url: Optional[str] = None,
    ):
        self.confirmer = confirmer
        self.client_secret = client_secret
        self.element = element
        self.return_url = return_url or settings.checkout_return_url
        self._on_success = on_success
        self._in_flight = False
        self._succeeded = False
        self.error_message: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    @property
    def submit_enabled(self) -> bool:
        """The submit control is disabled while confirming and after success."""
        return not self._in_flight and not self._succeeded

    @trace_span
    async def confirm(self) -> ConfirmationOutcome:
        """
        Confirm the payment.

        Raises:
            CheckoutStateError: if a confirmation is already in flight or the
                payment was already confirmed
        """
        if self._in_flight:
            raise CheckoutStateError("A payment confirmation is already in progress")
        if self._succeeded:
            raise CheckoutStateError("Payment has already been confirmed")

        if not self.element.billing_email or not self.element.billing_name:
            self.error_message = MISSING_BILLING_DETAILS_MESSAGE
            return ConfirmationOutcome(
                success=False, error_message=MISSING_BILLING_DETAILS_MESSAGE
            )

        self._in_flight = True
        self.error_message = None
        try:
            result = await self.confirmer.confirm_payment(
                client_secret=self.client_secret,
                element=self.element,
                return_url=self.return_url,
            )
        finally:
            self._in_flight = False

        if result.is_success:
            self._succeeded = True
            callback_result = self._on_success()
            if inspect.isawaitable(callback_result):
                await callback_result
            return ConfirmationOutcome(success=True)

        if result.redirect_url:
            logger.info("Payment method requires a redirect to complete")
            return ConfirmationOutcome(success=False, redirect_url=result.redirect_url)

        self.error_message = result.error_message
        return ConfirmationOutcome(success=False, error_message=result.error_message)
