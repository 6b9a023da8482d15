"""Service for validating contact submissions and forwarding them to the CRM."""

from typing import Any, Callable, Optional

from common.core.exceptions import ValidationError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.contacts.models.domain.contact import ContactResult, ContactSubmission
from packages.contacts.models.schemas.contact import ContactRequest
from packages.contacts.providers.crm.factory import get_crm_provider
from packages.contacts.providers.crm.interface import CrmProviderInterface
from packages.contacts.validation import is_valid_email, is_valid_phone

logger = get_logger(__name__)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _parse_employee_count(value: Any) -> Optional[int]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        count = int(str(value).strip())
    except ValueError:
        raise ValidationError("Employee count must be a whole number")
    return count if count > 0 else None


class ContactService:
    """Validates contact submissions and forwards them to the CRM."""

    def __init__(
        self,
        provider_factory: Callable[[], CrmProviderInterface] = get_crm_provider,
    ):
        # Resolved per submission so a missing key is reported after validation
        self._provider_factory = provider_factory

    def validate(self, request: ContactRequest) -> ContactSubmission:
        """Check required fields and formats, raising ValidationError."""
        email = _clean(request.email)
        name = _clean(request.name)
        phone = _clean(request.phone)

        if not email:
            raise ValidationError("Email is required")
        if not name:
            raise ValidationError("Name is required")
        if not phone:
            raise ValidationError("Phone is required")
        if not is_valid_email(email):
            raise ValidationError("Please enter a valid email address")
        if not is_valid_phone(phone):
            raise ValidationError(
                "Please enter a valid phone number with at least 10 digits"
            )

        return ContactSubmission(
            name=name,
            email=email,
            phone=phone,
            company=_clean(request.company),
            address=_clean(request.address),
            city=_clean(request.city),
            state=_clean(request.state),
            zip=_clean(request.zip),
            plan_name=_clean(request.plan_name),
            billing_cycle=_clean(request.billing_cycle),
            employee_count=_parse_employee_count(request.employee_count),
            is_waitlist=request.is_waitlist,
        )

    @trace_span
    async def submit(self, request: ContactRequest) -> ContactResult:
        """Validate and forward a submission."""
        contact = self.validate(request)
        provider = self._provider_factory()
        result = await provider.create_contact(contact)
        logger.info(
            "Contact submitted",
            extra={"is_waitlist": contact.is_waitlist, "plan": contact.plan_name},
        )
        return result
