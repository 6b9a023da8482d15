"""
Payment intent API routes.

Public endpoints used by the checkout page. Every failure is returned as a
single JSON error; the client secret is only ever returned on success.
"""

from fastapi import APIRouter, Depends, Request

from common.core.config import settings
from common.core.exceptions import AppException, ConfigurationError, ProcessingError
from common.core.otel_axiom_exporter import get_logger
from common.providers.rate_limiter.limiter import limiter
from packages.payments.models.schemas.payment_intent import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    StripeConfigResponse,
    TaxResponse,
)
from packages.payments.services.payment_intent_service import PaymentIntentService

logger = get_logger(__name__)

router = APIRouter()


def get_payment_intent_service() -> PaymentIntentService:
    return PaymentIntentService()


@router.post(
    "/create-payment-intent",
    response_model=CreatePaymentIntentResponse,
    response_model_exclude_none=True,
    response_model_by_alias=True,
)
@limiter.limit(settings.payment_intent_rate_limit)
async def create_payment_intent(
    request: Request,
    body: CreatePaymentIntentRequest,
    service: PaymentIntentService = Depends(get_payment_intent_service),
):
    """
    Create a payment intent for the amount computed by the checkout page.

    - 200: clientSecret, plus tax when an address was supplied
    - 400: invalid amount/currency/address or a processor-side rejection
    - 500: missing credentials or processor failure
    """
    try:
        intent_request = service.build_request(
            amount=body.amount,
            currency=body.currency,
            metadata=body.metadata,
            address=body.address,
        )
        result = await service.create_payment_intent(intent_request)
    except AppException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error creating payment intent: {e}")
        raise ProcessingError("Failed to create payment intent") from e

    tax = None
    if result.tax is not None:
        tax = TaxResponse(
            calculation_id=result.tax.calculation_id,
            amount_exclusive=result.tax.amount_exclusive,
            amount_inclusive=result.tax.amount_inclusive,
            amount_total=result.tax.amount_total,
        )
    return CreatePaymentIntentResponse(client_secret=result.client_secret, tax=tax)


@router.get("/config", response_model=StripeConfigResponse, response_model_by_alias=True)
async def get_stripe_config():
    """Publishable key for initializing the processor's client library."""
    if not settings.stripe_publishable_key:
        raise ConfigurationError("STRIPE_PUBLISHABLE_KEY is not set")
    return StripeConfigResponse(publishable_key=settings.stripe_publishable_key)
