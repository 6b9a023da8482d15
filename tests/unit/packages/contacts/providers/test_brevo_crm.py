"""
Unit tests for the Brevo CRM provider.

Uses httpx.MockTransport in place of the Brevo API.
"""

import json
import httpx
import pytest
from unittest.mock import patch

from common.core.exceptions import ConfigurationError, UpstreamError
from packages.contacts.models.domain.contact import ContactSubmission
from packages.contacts.providers.crm.brevo_crm import (
    DUPLICATE_CONTACT_MESSAGE,
    FAILED_CONTACT_MESSAGE,
    INVALID_PHONE_MESSAGE,
    SERVICE_UNAVAILABLE_MESSAGE,
    BrevoCrmProvider,
)
from packages.contacts.providers.crm.factory import resolve_brevo_api_key

CONTACT = ContactSubmission(
    name="Jane Doe",
    email="jane@acme.com",
    phone="(555) 123-4567",
    company="Acme Inc",
    plan_name="Standard",
    billing_cycle="annual",
    employee_count=12,
)


def make_provider(handler):
    return BrevoCrmProvider(
        api_key="xkeysib-test",
        api_url="https://api.brevo.test/v3/contacts",
        transport=httpx.MockTransport(handler),
    )


class TestBuildPayload:
    """Tests for BrevoCrmProvider.build_payload."""

    def test_contact_list(self):
        payload = make_provider(lambda r: None).build_payload(CONTACT)

        assert payload["email"] == "jane@acme.com"
        assert payload["listIds"] == [2]
        assert payload["updateEnabled"] is False
        assert payload["attributes"]["FIRSTNAME"] == "Jane Doe"
        assert payload["attributes"]["PLAN_NAME"] == "Standard"
        assert payload["attributes"]["EMPLOYEE_COUNT"] == "12"
        assert payload["attributes"]["IS_WAITLIST"] == "No"

    def test_waitlist_list(self):
        contact = CONTACT.model_copy(update={"is_waitlist": True})

        payload = make_provider(lambda r: None).build_payload(contact)

        assert payload["listIds"] == [3]
        assert payload["attributes"]["IS_WAITLIST"] == "Yes"


@pytest.mark.asyncio
class TestCreateContact:
    """Tests for BrevoCrmProvider.create_contact."""

    async def test_success(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["api_key"] = request.headers["api-key"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": 42})

        result = await make_provider(handler).create_contact(CONTACT)

        assert result.success is True
        assert captured["api_key"] == "xkeysib-test"
        assert captured["body"]["email"] == "jane@acme.com"

    async def test_duplicate_is_success(self):
        def handler(request):
            return httpx.Response(
                400,
                json={"code": "duplicate_parameter", "message": "Contact already exist"},
            )

        result = await make_provider(handler).create_contact(CONTACT)

        assert result.success is True
        assert result.message == DUPLICATE_CONTACT_MESSAGE

    async def test_unauthorized_is_503(self):
        def handler(request):
            return httpx.Response(401, json={"code": "unauthorized", "message": "Key not found"})

        with pytest.raises(UpstreamError) as exc_info:
            await make_provider(handler).create_contact(CONTACT)

        assert exc_info.value.status_code == 503
        assert exc_info.value.message == SERVICE_UNAVAILABLE_MESSAGE

    async def test_invalid_phone_is_400(self):
        def handler(request):
            return httpx.Response(
                400,
                json={"code": "invalid_parameter", "message": "Invalid phone number"},
            )

        with pytest.raises(UpstreamError) as exc_info:
            await make_provider(handler).create_contact(CONTACT)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == INVALID_PHONE_MESSAGE

    async def test_other_error_is_500(self):
        def handler(request):
            return httpx.Response(500, text="upstream exploded")

        with pytest.raises(UpstreamError) as exc_info:
            await make_provider(handler).create_contact(CONTACT)

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == FAILED_CONTACT_MESSAGE

    async def test_network_error_is_500(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out")

        with pytest.raises(UpstreamError) as exc_info:
            await make_provider(handler).create_contact(CONTACT)

        assert exc_info.value.message == FAILED_CONTACT_MESSAGE


class TestResolveBrevoApiKey:
    """Tests for resolve_brevo_api_key."""

    SETTINGS_PATH = "packages.contacts.providers.crm.factory.settings"

    def test_server_key_preferred(self):
        with patch(self.SETTINGS_PATH) as mock_settings:
            mock_settings.is_production = False
            mock_settings.brevo_api_key = "server-key"
            mock_settings.brevo_public_api_key = "public-key"

            assert resolve_brevo_api_key() == "server-key"

    def test_public_key_fallback_outside_production(self):
        with patch(self.SETTINGS_PATH) as mock_settings:
            mock_settings.is_production = False
            mock_settings.brevo_api_key = ""
            mock_settings.brevo_public_api_key = "public-key"

            assert resolve_brevo_api_key() == "public-key"

    def test_no_fallback_in_production(self):
        with patch(self.SETTINGS_PATH) as mock_settings:
            mock_settings.is_production = True
            mock_settings.brevo_api_key = ""
            mock_settings.brevo_public_api_key = "public-key"

            with pytest.raises(ConfigurationError):
                resolve_brevo_api_key()
