"""Validation for onboarding questionnaire submissions."""

from typing import Any, Mapping

from common.core.exceptions import ValidationError
from common.core.otel_axiom_exporter import get_logger
from packages.contacts.validation import is_valid_email, is_valid_phone

logger = get_logger(__name__)

REQUIRED_FIELDS = (
    "companyName",
    "industry",
    "employeeCount",
    "contactName",
    "contactEmail",
    "contactPhone",
    "address",
    "city",
    "state",
    "zipCode",
)


def missing_fields(data: Mapping[str, Any]) -> list[str]:
    return [field for field in REQUIRED_FIELDS if not data.get(field)]


def validate_onboarding(data: Mapping[str, Any]) -> None:
    """Raise ValidationError for missing fields or malformed contact details."""
    missing = missing_fields(data)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    if not is_valid_email(str(data["contactEmail"])):
        raise ValidationError("Please enter a valid email address")

    if not is_valid_phone(str(data["contactPhone"])):
        raise ValidationError(
            "Please enter a valid phone number with at least 10 digits"
        )


def acknowledge_onboarding(data: Mapping[str, Any]) -> str:
    """Validate a submission and acknowledge it. Nothing is persisted."""
    validate_onboarding(data)
    logger.info(
        "Onboarding data received",
        extra={"industry": data.get("industry"), "employee_count": data.get("employeeCount")},
    )
    return "Onboarding data received successfully"
