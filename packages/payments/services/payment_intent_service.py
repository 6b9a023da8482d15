"""Service for creating payment intents from checkout submissions."""

import math
import re
from typing import Any, Mapping, Optional

from common.core.config import settings
from common.core.exceptions import ValidationError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.payments.models.domain.payment_intent import (
    BillingAddress,
    PaymentIntentRequest,
    PaymentIntentResult,
    TaxContext,
)
from packages.payments.models.schemas.payment_intent import AddressPayload
from packages.payments.providers.payment.factory import get_payment_provider
from packages.payments.providers.payment.interface import PaymentProviderInterface

logger = get_logger(__name__)

INVALID_AMOUNT_MESSAGE = "A valid amount is required"
INVALID_CURRENCY_MESSAGE = "A valid currency is required"
INVALID_ADDRESS_MESSAGE = "A valid address country is required"

_CURRENCY_PATTERN = re.compile(r"^[a-z]{3}$")
_DIGITS_PATTERN = re.compile(r"[0-9]+")

# Largest amount Stripe accepts for a single charge
MAX_AMOUNT_CENTS = 99_999_999
_MAX_AMOUNT_DIGITS = len(str(MAX_AMOUNT_CENTS))


def parse_amount_cents(amount: Any) -> int:
    """
    Validate a requested amount in cents.

    Accepts ints, integral floats and plain digit strings ("1000") up to
    MAX_AMOUNT_CENTS. Rejects missing values, booleans, exponent or decimal
    notation in strings, fractions of a cent and amounts that are not positive.
    """
    if amount is None or isinstance(amount, bool):
        raise ValidationError(INVALID_AMOUNT_MESSAGE)

    if isinstance(amount, int):
        value = amount
    elif isinstance(amount, float):
        if not math.isfinite(amount) or not amount.is_integer():
            raise ValidationError(INVALID_AMOUNT_MESSAGE)
        value = int(amount)
    elif isinstance(amount, str):
        digits = amount.strip()
        if len(digits) > _MAX_AMOUNT_DIGITS or not _DIGITS_PATTERN.fullmatch(digits):
            raise ValidationError(INVALID_AMOUNT_MESSAGE)
        value = int(digits)
    else:
        raise ValidationError(INVALID_AMOUNT_MESSAGE)

    if value <= 0 or value > MAX_AMOUNT_CENTS:
        raise ValidationError(INVALID_AMOUNT_MESSAGE)
    return value


def normalize_currency(currency: Optional[str]) -> str:
    """Lowercase ISO 4217 code, defaulting to the configured currency."""
    if currency is None or not str(currency).strip():
        return settings.default_currency
    code = str(currency).strip().lower()
    if not _CURRENCY_PATTERN.match(code):
        raise ValidationError(INVALID_CURRENCY_MESSAGE)
    return code


def normalize_metadata(metadata: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Stripe metadata is string -> string; drop empty values."""
    if not metadata:
        return {}
    normalized = {}
    for key, value in metadata.items():
        if value is None:
            continue
        normalized[str(key)] = value if isinstance(value, str) else str(value)
    return normalized


def build_tax_context(address: Optional[AddressPayload]) -> Optional[TaxContext]:
    """Turn a submitted address into a TaxContext, or None when absent."""
    if address is None:
        return None
    if not address.country or not address.country.strip():
        raise ValidationError(INVALID_ADDRESS_MESSAGE)
    return TaxContext(
        address=BillingAddress(
            line1=(address.line1 or "").strip(),
            line2=(address.line2 or "").strip(),
            city=(address.city or "").strip(),
            state=(address.state or "").strip(),
            postal_code=(address.postal_code or "").strip(),
            country=address.country.strip().upper(),
        )
    )


class PaymentIntentService:
    """Validates checkout submissions and creates processor-side intents."""

    def __init__(self, provider: Optional[PaymentProviderInterface] = None):
        self.provider = provider or get_payment_provider()

    def build_request(
        self,
        amount: Any,
        currency: Optional[str] = None,
        metadata: Optional[Mapping[str, Any]] = None,
        address: Optional[AddressPayload] = None,
    ) -> PaymentIntentRequest:
        """Validate raw submission fields into a PaymentIntentRequest."""
        return PaymentIntentRequest(
            amount_cents=parse_amount_cents(amount),
            currency=normalize_currency(currency),
            metadata=normalize_metadata(metadata),
            tax_context=build_tax_context(address),
        )

    @trace_span
    async def create_payment_intent(
        self, request: PaymentIntentRequest
    ) -> PaymentIntentResult:
        """
        Create a payment intent, calculating tax first when an address is present.

        Repeated calls with the same input create distinct intents.
        """
        tax = None
        if request.requires_tax:
            tax = await self.provider.calculate_tax(request)

        result = await self.provider.create_payment_intent(request, tax=tax)

        logger.info(
            "Payment intent ready",
            extra={
                "payment_intent_id": result.intent_id,
                "amount": request.amount_cents,
                "plan": request.metadata.get("plan"),
                "tax_calculated": tax is not None,
            },
        )
        return result
