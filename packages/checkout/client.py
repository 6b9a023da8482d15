"""
HTTP client for the checkout flow.

Calls this service's payment intent and contact endpoints the way the
checkout page does, turning error responses into UpstreamError with the
server's message.
"""

from typing import Any, Optional

import httpx

from common.core.exceptions import UpstreamError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.checkout.models.domain.confirmation import IssuedIntent

logger = get_logger(__name__)

PAYMENT_INIT_FAILED_MESSAGE = "Failed to initialize payment. Please try again."
ORDER_SUBMIT_FAILED_MESSAGE = "Failed to submit request. Please try again."

PAYMENT_INTENT_PATH = "/api/stripe/create-payment-intent"
CONTACT_PATH = "/api/contact"


class CheckoutApiClient:
    """Async client for the checkout endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _post(
        self, path: str, payload: dict[str, Any], failure_message: str
    ) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {e}")
            raise UpstreamError(failure_message, status_code=503) from e

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            raise UpstreamError(failure_message, status_code=response.status_code)

        if not response.is_success or data.get("error"):
            raise UpstreamError(
                data.get("error") or failure_message,
                status_code=response.status_code if not response.is_success else 500,
            )
        return data

    @trace_span
    async def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        metadata: dict[str, str],
        address: Optional[dict[str, str]] = None,
    ) -> IssuedIntent:
        """Request a new payment intent for ``amount_cents``."""
        payload: dict[str, Any] = {
            "amount": amount_cents,
            "currency": currency,
            "metadata": metadata,
        }
        if address is not None:
            payload["address"] = address

        data = await self._post(
            PAYMENT_INTENT_PATH, payload, PAYMENT_INIT_FAILED_MESSAGE
        )
        client_secret = data.get("clientSecret")
        tax = data.get("tax")
        if not isinstance(client_secret, str) or not client_secret:
            raise UpstreamError(PAYMENT_INIT_FAILED_MESSAGE)
        if tax is not None and not isinstance(tax, dict):
            raise UpstreamError(PAYMENT_INIT_FAILED_MESSAGE)

        return IssuedIntent(
            client_secret=client_secret,
            amount_cents=amount_cents,
            tax=tax,
        )

    @trace_span
    async def submit_contact(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Forward a contact or invoice order."""
        return await self._post(CONTACT_PATH, payload, ORDER_SUBMIT_FAILED_MESSAGE)
