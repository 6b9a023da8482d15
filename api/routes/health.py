from fastapi import APIRouter, Request

from common.core.config import settings
from common.core.otel_axiom_exporter import get_logger
from common.providers.rate_limiter.limiter import limiter

logger = get_logger(__name__)

router = APIRouter()


@router.get("/")
async def health_check(request: Request):
    # No rate limiting or logging - k8s probes hit this every 5-10s
    return {"status": "healthy", "service": settings.otel_service_name}


@router.get("/stripe")
@limiter.limit("100/minute")
async def stripe_check(request: Request):
    """Report whether payment credentials are configured, never their values."""
    configured = bool(settings.stripe_secret_key and settings.stripe_publishable_key)
    if not configured:
        logger.warning("Stripe credentials are not fully configured")
    return {
        "status": "healthy" if configured else "unhealthy",
        "stripe": "configured" if configured else "missing",
    }
