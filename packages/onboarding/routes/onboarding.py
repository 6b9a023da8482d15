"""
Onboarding API routes.
"""

from fastapi import APIRouter, Request

from common.core.exceptions import AppException, ProcessingError
from common.core.otel_axiom_exporter import get_logger
from packages.onboarding.services.onboarding_service import acknowledge_onboarding

logger = get_logger(__name__)

router = APIRouter()

FAILED_ONBOARDING_MESSAGE = "Failed to process onboarding data"


@router.post("")
async def submit_onboarding(request: Request) -> dict:
    """
    Accept the onboarding questionnaire.

    The body is free-form JSON; only the required fields are checked.
    An unparsable body is a 500, matching the form's generic failure panel.
    """
    try:
        data = await request.json()
        if not isinstance(data, dict):
            raise ValueError("Onboarding payload must be a JSON object")
        message = acknowledge_onboarding(data)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Onboarding form submission error: {e}")
        raise ProcessingError(FAILED_ONBOARDING_MESSAGE) from e

    return {"success": True, "message": message}
