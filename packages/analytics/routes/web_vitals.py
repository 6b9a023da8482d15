"""
Web vitals beacon endpoint.
"""

from fastapi import APIRouter, Request

from common.core.config import settings
from common.core.exceptions import ProcessingError
from common.core.otel_axiom_exporter import get_logger, log_span_event
from packages.analytics.models.schemas.web_vitals import WebVitalsMetric

logger = get_logger(__name__)

router = APIRouter()


@router.post("/web-vitals")
async def report_web_vitals(request: Request) -> dict:
    """Record a web-vitals metric. Logged outside production only."""
    try:
        metric = WebVitalsMetric.model_validate(await request.json())
    except Exception as e:
        logger.error(f"Error processing web vitals: {e}")
        raise ProcessingError("Failed to process web vitals data") from e

    if not settings.is_production:
        log_span_event(
            "Web Vitals",
            {
                "metric_name": metric.name or "",
                "metric_id": metric.id or "",
                "value": metric.value if metric.value is not None else 0.0,
                "rating": metric.rating or "",
            },
        )

    return {"success": True}
