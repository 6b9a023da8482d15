"""
Brevo implementation of CRM provider.
"""

from typing import Any, Optional

import httpx

from common.core.exceptions import UpstreamError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.contacts.models.domain.contact import ContactResult, ContactSubmission
from packages.contacts.providers.crm.interface import CrmProviderInterface

logger = get_logger(__name__)

DUPLICATE_CONTACT_MESSAGE = (
    "Your information has already been submitted. We will contact you soon."
)
INVALID_PHONE_MESSAGE = "Please enter a valid phone number"
SERVICE_UNAVAILABLE_MESSAGE = "Contact service is temporarily unavailable"
FAILED_CONTACT_MESSAGE = "Failed to process contact form"


class BrevoCrmProvider(CrmProviderInterface):
    """Brevo (v3 contacts API) CRM implementation."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.brevo.com/v3/contacts",
        contact_list_id: int = 2,
        waitlist_list_id: int = 3,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.contact_list_id = contact_list_id
        self.waitlist_list_id = waitlist_list_id
        self.timeout = timeout
        self._transport = transport

    def build_payload(self, contact: ContactSubmission) -> dict[str, Any]:
        """Brevo contact body with the form's plan/billing attributes."""
        return {
            "email": contact.email,
            "attributes": {
                "FIRSTNAME": contact.name,
                "PHONE": contact.phone,
                "COMPANY": contact.company,
                "ADDRESS": contact.address,
                "CITY": contact.city,
                "STATE": contact.state,
                "ZIP": contact.zip,
                "PLAN_NAME": contact.plan_name,
                "BILLING_CYCLE": contact.billing_cycle,
                "EMPLOYEE_COUNT": (
                    str(contact.employee_count) if contact.employee_count else ""
                ),
                "IS_WAITLIST": "Yes" if contact.is_waitlist else "No",
            },
            "listIds": [
                self.waitlist_list_id if contact.is_waitlist else self.contact_list_id
            ],
            "updateEnabled": False,
        }

    @trace_span
    async def create_contact(self, contact: ContactSubmission) -> ContactResult:
        """Create a Brevo contact, translating known API errors."""
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "api-key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.api_url, json=self.build_payload(contact), headers=headers
                )
        except httpx.HTTPError as e:
            logger.error(
                f"Brevo request failed: {e}",
                extra={"error": str(e)},
            )
            raise UpstreamError(FAILED_CONTACT_MESSAGE, status_code=500) from e

        if response.is_success:
            logger.info(
                "Created Brevo contact",
                extra={"is_waitlist": contact.is_waitlist, "plan": contact.plan_name},
            )
            return ContactResult(success=True)

        return self._handle_error_response(response)

    def _handle_error_response(self, response: httpx.Response) -> ContactResult:
        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {}

        code = str(error_data.get("code") or "")
        message = str(error_data.get("message") or "")
        logger.error(
            "Brevo API error",
            extra={"status_code": response.status_code, "code": code, "message": message},
        )

        if code == "duplicate_parameter":
            return ContactResult(success=True, message=DUPLICATE_CONTACT_MESSAGE)

        if response.status_code in (401, 403) or code in ("unauthorized", "permission_denied"):
            raise UpstreamError(SERVICE_UNAVAILABLE_MESSAGE, status_code=503)

        if code == "invalid_parameter" and any(
            field in message.lower() for field in ("phone", "sms")
        ):
            raise UpstreamError(INVALID_PHONE_MESSAGE, status_code=400)

        raise UpstreamError(FAILED_CONTACT_MESSAGE, status_code=500)
