"""
Stripe implementation of payment confirmer.

Confirms with the publishable key plus the intent's client secret, the same
call Stripe.js makes from the browser.
"""

import asyncio
from typing import Any, Optional

import stripe

from common.core.exceptions import ConfigurationError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.checkout.models.domain.confirmation import (
    ConfirmationResult,
    PaymentElement,
)
from packages.checkout.models.domain.enums import ConfirmationStatus
from packages.checkout.providers.confirmation.interface import PaymentConfirmerInterface

logger = get_logger(__name__)

GENERIC_DECLINE_MESSAGE = "Your payment was not successful, please try again."
PROCESSOR_UNAVAILABLE_MESSAGE = "Payment processor is unavailable. Please try again."


def intent_id_from_client_secret(client_secret: str) -> Optional[str]:
    """``pi_123_secret_abc`` -> ``pi_123``."""
    intent_id, separator, _ = client_secret.partition("_secret_")
    if not separator or not intent_id:
        return None
    return intent_id


class StripePaymentConfirmer(PaymentConfirmerInterface):
    """Stripe-based payment confirmation."""

    def __init__(self, publishable_key: str, api_version: Optional[str] = None):
        self._publishable_key = publishable_key
        self._api_version = api_version

    def _request_options(self) -> dict[str, Any]:
        if not self._publishable_key:
            raise ConfigurationError("STRIPE_PUBLISHABLE_KEY is not set")
        options: dict[str, Any] = {"api_key": self._publishable_key}
        if self._api_version:
            options["stripe_version"] = self._api_version
        return options

    @trace_span
    async def confirm_payment(
        self,
        client_secret: str,
        element: PaymentElement,
        return_url: str,
    ) -> ConfirmationResult:
        options = self._request_options()

        intent_id = intent_id_from_client_secret(client_secret)
        if intent_id is None:
            return ConfirmationResult(
                status=ConfirmationStatus.FAILED,
                error_message=GENERIC_DECLINE_MESSAGE,
            )

        payment_method_data = {
            "type": element.payment_method_type,
            element.payment_method_type: element.details,
            "billing_details": {
                "email": element.billing_email,
                "name": element.billing_name,
            },
        }

        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.confirm,
                intent_id,
                client_secret=client_secret,
                payment_method_data=payment_method_data,
                return_url=return_url,
                **options,
            )
        except (stripe.AuthenticationError, stripe.PermissionError) as e:
            raise ConfigurationError(
                f"Stripe rejected the publishable key: {e}"
            ) from e
        except (stripe.CardError, stripe.InvalidRequestError) as e:
            logger.info(
                "Payment confirmation declined",
                extra={"payment_intent_id": intent_id, "code": e.code},
            )
            return ConfirmationResult(
                status=ConfirmationStatus.FAILED,
                error_message=e.user_message or GENERIC_DECLINE_MESSAGE,
            )
        except stripe.StripeError as e:
            logger.error(
                f"Payment confirmation failed: {e}",
                extra={"payment_intent_id": intent_id, "error": str(e)},
            )
            return ConfirmationResult(
                status=ConfirmationStatus.FAILED,
                error_message=PROCESSOR_UNAVAILABLE_MESSAGE,
            )

        return self._result_from_intent(intent)

    def _result_from_intent(self, intent: Any) -> ConfirmationResult:
        status = intent.status
        if status == "succeeded":
            return ConfirmationResult(status=ConfirmationStatus.SUCCEEDED)
        if status in ("processing", "requires_capture"):
            return ConfirmationResult(status=ConfirmationStatus.PROCESSING)

        if status == "requires_action":
            next_action = getattr(intent, "next_action", None)
            if next_action is not None and next_action.type == "redirect_to_url":
                return ConfirmationResult(
                    status=ConfirmationStatus.REQUIRES_ACTION,
                    redirect_url=next_action.redirect_to_url.url,
                )

        last_error = getattr(intent, "last_payment_error", None)
        message = getattr(last_error, "message", None) if last_error else None
        return ConfirmationResult(
            status=ConfirmationStatus.FAILED,
            error_message=message or GENERIC_DECLINE_MESSAGE,
        )
