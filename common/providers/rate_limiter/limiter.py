"""Global rate limiter instance for SlowAPI."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from common.core.config import settings

# Per-client limits on public form endpoints. Individual routes tighten these
# (payment intents and contact submissions create third-party objects).
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["10/second", "300/minute"],
    storage_uri=settings.rate_limit_storage_uri,
)
