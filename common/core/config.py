from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import Environment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # API Settings
    app_name: str = "it-services-checkout"
    api_version: str = "1.0.0"
    debug: bool = False

    # Public site URL, used to build payment confirmation return URLs
    public_site_url: str = "http://localhost:3000"

    # Billing - Stripe (payments)
    # Empty keys are allowed at startup; callers raise ConfigurationError on use
    stripe_secret_key: str = ""
    stripe_publishable_key: str = ""
    stripe_api_version: Optional[str] = None
    default_currency: str = "usd"

    # CRM - Brevo (contact forwarding)
    brevo_api_key: str = ""
    brevo_public_api_key: str = ""  # Development fallback only
    brevo_api_url: str = "https://api.brevo.com/v3/contacts"
    brevo_contact_list_id: int = 2
    brevo_waitlist_list_id: int = 3
    brevo_timeout_seconds: float = 10.0

    # OpenTelemetry
    otel_service_name: str = "it-services-checkout"
    otel_exporter_endpoint: Optional[str] = None
    otel_exporter_token: Optional[str] = None

    # Rate limiting
    rate_limit_storage_uri: str = "memory://"
    payment_intent_rate_limit: str = "20/minute"
    contact_rate_limit: str = "5/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def docs_enabled(self) -> bool:
        """Only expose OpenAPI docs in local development."""
        return self.environment == Environment.LOCAL

    @property
    def cors_allowed_origins(self) -> List[str]:
        """Auto-select CORS origins based on environment."""
        if self.environment == Environment.LOCAL:
            return [
                "http://localhost:3000",
                "http://localhost:3001",
            ]
        return [self.public_site_url.rstrip("/")]

    @property
    def checkout_return_url(self) -> str:
        """Where the processor sends the browser after a redirect-based payment."""
        return f"{self.public_site_url.rstrip('/')}/checkout/confirmation"


settings = Settings()
