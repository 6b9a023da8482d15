"""
Unit tests for application settings.
"""

from common.core.config import Settings
from common.core.constants import Environment
from common.core.exceptions import ConfigurationError, UpstreamError, ValidationError


class TestSettings:
    """Tests for environment-derived settings."""

    def test_defaults_allow_missing_credentials(self):
        settings = Settings(_env_file=None)

        assert settings.stripe_secret_key == ""
        assert settings.default_currency == "usd"
        assert settings.brevo_contact_list_id == 2
        assert settings.brevo_waitlist_list_id == 3

    def test_checkout_return_url(self):
        settings = Settings(_env_file=None, public_site_url="https://itservices.example/")

        assert (
            settings.checkout_return_url
            == "https://itservices.example/checkout/confirmation"
        )

    def test_production_profile(self):
        settings = Settings(
            _env_file=None,
            environment=Environment.PRODUCTION,
            public_site_url="https://itservices.example",
        )

        assert settings.is_production is True
        assert settings.docs_enabled is False
        assert settings.cors_allowed_origins == ["https://itservices.example"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_env")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        settings = Settings(_env_file=None)

        assert settings.stripe_secret_key == "sk_test_env"
        assert settings.environment == Environment.STAGING


class TestExceptions:
    """Tests for the application error taxonomy."""

    def test_status_codes(self):
        assert ValidationError("bad").status_code == 400
        assert UpstreamError("down").status_code == 500
        assert UpstreamError("down", status_code=503).status_code == 503

    def test_configuration_error_hides_detail(self):
        error = ConfigurationError("STRIPE_SECRET_KEY is not set")

        assert error.message == "STRIPE_SECRET_KEY is not set"
        assert error.public_message == "Server configuration error"
