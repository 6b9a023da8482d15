"""
Unit tests for the Stripe payment confirmer.
"""

import pytest
import stripe
from types import SimpleNamespace
from unittest.mock import patch

from common.core.exceptions import ConfigurationError
from packages.checkout.models.domain.enums import ConfirmationStatus
from packages.checkout.providers.confirmation.factory import get_payment_confirmer
from packages.checkout.providers.confirmation.stripe_confirmer import (
    GENERIC_DECLINE_MESSAGE,
    PROCESSOR_UNAVAILABLE_MESSAGE,
    StripePaymentConfirmer,
    intent_id_from_client_secret,
)

RETURN_URL = "https://example.com/checkout/confirmation"
CONFIRM_PATH = "stripe.PaymentIntent.confirm"


@pytest.fixture
def confirmer():
    return StripePaymentConfirmer(publishable_key="pk_test_123")


def test_intent_id_from_client_secret():
    assert intent_id_from_client_secret("pi_123_secret_abc") == "pi_123"
    assert intent_id_from_client_secret("not-a-secret") is None


@pytest.mark.asyncio
class TestStripePaymentConfirmer:
    """Tests for StripePaymentConfirmer.confirm_payment."""

    async def test_confirms_with_publishable_key(self, confirmer, payment_element):
        with patch(
            CONFIRM_PATH, return_value=SimpleNamespace(status="succeeded")
        ) as mock_confirm:
            result = await confirmer.confirm_payment(
                "pi_123_secret_abc", payment_element, RETURN_URL
            )

        assert result.status == ConfirmationStatus.SUCCEEDED
        args, kwargs = mock_confirm.call_args
        assert args == ("pi_123",)
        assert kwargs["api_key"] == "pk_test_123"
        assert kwargs["client_secret"] == "pi_123_secret_abc"
        assert kwargs["return_url"] == RETURN_URL
        assert kwargs["payment_method_data"] == {
            "type": "card",
            "card": {"token": "tok_visa"},
            "billing_details": {"email": "jane@acme.com", "name": "Acme Inc"},
        }

    async def test_missing_publishable_key(self, payment_element):
        confirmer = StripePaymentConfirmer(publishable_key="")

        with pytest.raises(ConfigurationError):
            await confirmer.confirm_payment(
                "pi_123_secret_abc", payment_element, RETURN_URL
            )

    async def test_card_error_returns_processor_message(
        self, confirmer, payment_element
    ):
        error = stripe.CardError(
            "Your card has insufficient funds.", None, "card_declined"
        )
        with patch(CONFIRM_PATH, side_effect=error):
            result = await confirmer.confirm_payment(
                "pi_123_secret_abc", payment_element, RETURN_URL
            )

        assert result.status == ConfirmationStatus.FAILED
        assert result.error_message == "Your card has insufficient funds."

    async def test_connection_error_returns_generic_message(
        self, confirmer, payment_element
    ):
        with patch(CONFIRM_PATH, side_effect=stripe.APIConnectionError("timeout")):
            result = await confirmer.confirm_payment(
                "pi_123_secret_abc", payment_element, RETURN_URL
            )

        assert result.error_message == PROCESSOR_UNAVAILABLE_MESSAGE

    async def test_authentication_error_is_configuration_error(
        self, confirmer, payment_element
    ):
        with patch(CONFIRM_PATH, side_effect=stripe.AuthenticationError("bad key")):
            with pytest.raises(ConfigurationError):
                await confirmer.confirm_payment(
                    "pi_123_secret_abc", payment_element, RETURN_URL
                )

    async def test_redirect_required(self, confirmer, payment_element):
        intent = SimpleNamespace(
            status="requires_action",
            next_action=SimpleNamespace(
                type="redirect_to_url",
                redirect_to_url=SimpleNamespace(url="https://hooks.stripe.com/r/abc"),
            ),
        )
        with patch(CONFIRM_PATH, return_value=intent):
            result = await confirmer.confirm_payment(
                "pi_123_secret_abc", payment_element, RETURN_URL
            )

        assert result.status == ConfirmationStatus.REQUIRES_ACTION
        assert result.redirect_url == "https://hooks.stripe.com/r/abc"

    async def test_requires_payment_method_uses_last_error(
        self, confirmer, payment_element
    ):
        intent = SimpleNamespace(
            status="requires_payment_method",
            last_payment_error=SimpleNamespace(message="Your card was declined."),
        )
        with patch(CONFIRM_PATH, return_value=intent):
            result = await confirmer.confirm_payment(
                "pi_123_secret_abc", payment_element, RETURN_URL
            )

        assert result.status == ConfirmationStatus.FAILED
        assert result.error_message == "Your card was declined."

    async def test_malformed_client_secret(self, confirmer, payment_element):
        with patch(CONFIRM_PATH) as mock_confirm:
            result = await confirmer.confirm_payment("garbage", payment_element, RETURN_URL)

        assert result.error_message == GENERIC_DECLINE_MESSAGE
        mock_confirm.assert_not_called()


def test_factory_uses_publishable_key():
    with patch(
        "packages.checkout.providers.confirmation.factory.settings"
    ) as mock_settings:
        mock_settings.stripe_publishable_key = "pk_test_factory"
        mock_settings.stripe_api_version = None

        confirmer = get_payment_confirmer()

    assert isinstance(confirmer, StripePaymentConfirmer)
    assert confirmer._request_options() == {"api_key": "pk_test_factory"}
