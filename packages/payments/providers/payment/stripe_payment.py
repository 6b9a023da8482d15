"""
Stripe implementation of payment provider.
"""

import asyncio
from typing import Any, Optional

import stripe

from common.core.exceptions import ConfigurationError, UpstreamError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.payments.models.domain.payment_intent import (
    BillingAddress,
    PaymentIntentRequest,
    PaymentIntentResult,
    TaxDetails,
)
from packages.payments.providers.payment.interface import PaymentProviderInterface

logger = get_logger(__name__)

PROCESSOR_UNAVAILABLE_MESSAGE = "Payment processor is unavailable. Please try again."


def translate_stripe_error(error: stripe.StripeError, operation: str) -> Exception:
    """
    Map a Stripe SDK error onto the application error taxonomy.

    - Authentication/permission failures are operator problems (bad key).
    - Card and invalid-request errors carry a message the customer can act on.
    - Everything else (network, rate limit, API outage) is a 500.
    """
    if isinstance(error, (stripe.AuthenticationError, stripe.PermissionError)):
        return ConfigurationError(f"Stripe rejected credentials during {operation}")
    if isinstance(error, (stripe.CardError, stripe.InvalidRequestError)):
        return UpstreamError(error.user_message or str(error), status_code=400)
    return UpstreamError(PROCESSOR_UNAVAILABLE_MESSAGE, status_code=500)


class StripePaymentProvider(PaymentProviderInterface):
    """Stripe-based payment implementation.

    The API key is passed on every call instead of being assigned to the
    module-global ``stripe.api_key``.
    """

    def __init__(self, secret_key: str, api_version: Optional[str] = None):
        self._secret_key = secret_key
        self._api_version = api_version

    def _request_options(self) -> dict[str, Any]:
        if not self._secret_key:
            raise ConfigurationError("STRIPE_SECRET_KEY is not set")
        options: dict[str, Any] = {"api_key": self._secret_key}
        if self._api_version:
            options["stripe_version"] = self._api_version
        return options

    @trace_span
    async def calculate_tax(self, request: PaymentIntentRequest) -> TaxDetails:
        """Calculate tax with Stripe Tax for the request's address."""
        if request.tax_context is None:
            raise ValueError("Tax calculation requires a tax context")

        options = self._request_options()
        address = {
            key: value
            for key, value in request.tax_context.address.to_stripe().items()
            if value
        }

        try:
            calculation = await asyncio.to_thread(
                stripe.tax.Calculation.create,
                currency=request.currency,
                line_items=[
                    {
                        "amount": request.amount_cents,
                        "reference": request.metadata.get("plan") or "checkout",
                    }
                ],
                customer_details={
                    "address": address,
                    "address_source": "shipping",
                },
                **options,
            )
        except stripe.StripeError as e:
            logger.error(
                f"Failed to calculate tax: {e}",
                extra={"country": address.get("country"), "error": str(e)},
            )
            raise translate_stripe_error(e, "tax calculation") from e

        tax = TaxDetails(
            calculation_id=calculation.id,
            amount_exclusive=calculation.tax_amount_exclusive or 0,
            amount_inclusive=calculation.tax_amount_inclusive or 0,
            amount_total=calculation.amount_total or request.amount_cents,
        )
        logger.info(
            "Calculated Stripe tax",
            extra={
                "calculation_id": tax.calculation_id,
                "tax_amount_exclusive": tax.amount_exclusive,
            },
        )
        return tax

    @trace_span
    async def create_payment_intent(
        self,
        request: PaymentIntentRequest,
        tax: Optional[TaxDetails] = None,
    ) -> PaymentIntentResult:
        """Create a Stripe PaymentIntent with automatic payment methods."""
        options = self._request_options()

        if request.tax_context is not None:
            shipping_address = request.tax_context.address.to_stripe()
        else:
            shipping_address = BillingAddress.blank_stripe_address()

        metadata = dict(request.metadata)
        if tax is not None and tax.calculation_id:
            metadata["tax_calculation_id"] = tax.calculation_id

        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.create,
                amount=request.amount_cents,
                currency=request.currency,
                metadata=metadata,
                automatic_payment_methods={"enabled": True},
                automatic_tax={"enabled": request.requires_tax},
                shipping={
                    "name": request.shipping_name,
                    "address": shipping_address,
                },
                **options,
            )
        except stripe.StripeError as e:
            logger.error(
                f"Failed to create payment intent: {e}",
                extra={
                    "amount": request.amount_cents,
                    "currency": request.currency,
                    "error": str(e),
                },
            )
            raise translate_stripe_error(e, "payment intent creation") from e

        logger.info(
            "Created Stripe payment intent",
            extra={
                "payment_intent_id": intent.id,
                "amount": request.amount_cents,
                "currency": request.currency,
                "automatic_tax": request.requires_tax,
            },
        )

        return PaymentIntentResult(
            intent_id=intent.id,
            client_secret=intent.client_secret,
            tax=tax,
        )
