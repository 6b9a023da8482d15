import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from packages.checkout.catalog import DEFAULT_PLANS, PlanCatalog
from packages.checkout.models.domain.confirmation import (
    ConfirmationResult,
    IssuedIntent,
    PaymentElement,
)
from packages.checkout.models.domain.enums import ConfirmationStatus
from packages.checkout.models.domain.plans import Plan
from packages.payments.models.domain.payment_intent import (
    PaymentIntentResult,
    TaxDetails,
)


@pytest.fixture
def plan_catalog():
    """Catalog with the default plans."""
    return PlanCatalog(DEFAULT_PLANS)


@pytest.fixture
def basic_plan():
    return Plan(
        name="Basic",
        monthly_price_per_seat=Decimal("99.00"),
        description="Basic plan",
        features=("Email support",),
    )


@pytest.fixture
def mock_payment_provider():
    """Create a mock payment provider instance for testing."""
    provider = AsyncMock()
    provider.calculate_tax = AsyncMock(
        return_value=TaxDetails(
            calculation_id="taxcalc_test123",
            amount_exclusive=4084,
            amount_inclusive=0,
            amount_total=53584,
        )
    )
    provider.create_payment_intent = AsyncMock(
        return_value=PaymentIntentResult(
            intent_id="pi_test123",
            client_secret="pi_test123_secret_abc",
        )
    )
    return provider


@pytest.fixture
def mock_checkout_client():
    """Mock of the checkout API client; issues intents for the requested amount."""
    client = MagicMock()

    async def create_payment_intent(amount_cents, currency, metadata, address=None):
        return IssuedIntent(
            client_secret=f"pi_{amount_cents}_secret_abc", amount_cents=amount_cents
        )

    client.create_payment_intent = AsyncMock(side_effect=create_payment_intent)
    client.submit_contact = AsyncMock(
        return_value={"success": True, "message": "Contact created successfully"}
    )
    return client


@pytest.fixture
def mock_confirmer():
    """Mock payment confirmer that succeeds by default."""
    confirmer = AsyncMock()
    confirmer.confirm_payment = AsyncMock(
        return_value=ConfirmationResult(status=ConfirmationStatus.SUCCEEDED)
    )
    return confirmer


@pytest.fixture
def payment_element():
    return PaymentElement(
        payment_method_type="card",
        details={"token": "tok_visa"},
        billing_email="jane@acme.com",
        billing_name="Acme Inc",
    )
