"""
Contact API routes.

Public endpoint behind the contact, waitlist and invoice-order forms.
"""

from fastapi import APIRouter, Depends, Request

from common.core.config import settings
from common.core.exceptions import AppException, ProcessingError
from common.core.otel_axiom_exporter import get_logger
from common.providers.rate_limiter.limiter import limiter
from packages.contacts.models.schemas.contact import ContactRequest, ContactResponse
from packages.contacts.services.contact_service import ContactService

logger = get_logger(__name__)

router = APIRouter()


def get_contact_service() -> ContactService:
    return ContactService()


@router.post("", response_model=ContactResponse, response_model_exclude_none=True)
@limiter.limit(settings.contact_rate_limit)
async def submit_contact(
    request: Request,
    body: ContactRequest,
    service: ContactService = Depends(get_contact_service),
):
    """
    Forward a contact submission to the CRM.

    - 400: missing/invalid name, email or phone
    - 500: missing CRM credentials or CRM failure
    - 503: CRM rejected our credentials
    """
    try:
        result = await service.submit(body)
    except AppException:
        raise
    except Exception as e:
        logger.exception(f"Contact form submission error: {e}")
        raise ProcessingError("Failed to process contact form") from e

    return ContactResponse(success=result.success, message=result.message)
