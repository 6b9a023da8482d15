"""
Unit tests for the contact API route.
"""

import pytest
from unittest.mock import AsyncMock

from api.main import app
from common.core.exceptions import ConfigurationError, UpstreamError
from packages.contacts.models.domain.contact import ContactResult
from packages.contacts.routes.contact import get_contact_service
from packages.contacts.services.contact_service import ContactService

BODY = {
    "name": "Jane Doe",
    "email": "jane@acme.com",
    "phone": "555-123-4567",
    "company": "Acme Inc",
    "isWaitlist": True,
}


@pytest.fixture
def mock_crm_provider():
    provider = AsyncMock()
    provider.create_contact = AsyncMock(return_value=ContactResult(success=True))
    app.dependency_overrides[get_contact_service] = lambda: ContactService(
        provider_factory=lambda: provider
    )
    yield provider
    app.dependency_overrides.pop(get_contact_service, None)


@pytest.mark.asyncio
class TestContactRoute:
    """Tests for POST /api/contact."""

    async def test_submits_contact(self, client, mock_crm_provider):
        response = await client.post("/api/contact", json=BODY)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        contact = mock_crm_provider.create_contact.call_args.args[0]
        assert contact.is_waitlist is True

    async def test_duplicate_message_returned(self, client, mock_crm_provider):
        mock_crm_provider.create_contact.return_value = ContactResult(
            success=True, message="Your information has already been submitted."
        )

        response = await client.post("/api/contact", json=BODY)

        assert response.json()["message"] == "Your information has already been submitted."

    async def test_invalid_email(self, client, mock_crm_provider):
        response = await client.post("/api/contact", json={**BODY, "email": "nope"})

        assert response.status_code == 400
        assert response.json() == {"error": "Please enter a valid email address"}
        mock_crm_provider.create_contact.assert_not_called()

    async def test_crm_unavailable(self, client, mock_crm_provider):
        mock_crm_provider.create_contact.side_effect = UpstreamError(
            "Contact service is temporarily unavailable", status_code=503
        )

        response = await client.post("/api/contact", json=BODY)

        assert response.status_code == 503
        assert response.json() == {"error": "Contact service is temporarily unavailable"}

    async def test_missing_key(self, client):
        def factory():
            raise ConfigurationError("Missing BREVO_API_KEY environment variable")

        app.dependency_overrides[get_contact_service] = lambda: ContactService(
            provider_factory=factory
        )

        response = await client.post("/api/contact", json=BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error"}
