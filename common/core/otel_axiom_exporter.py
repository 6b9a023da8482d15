from typing import Any, Dict, Optional
import functools
import asyncio
import logging
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from common.core.config import settings

# Configure logging at module level
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    force=True,  # This ensures it overrides any existing configuration
)


# Global flag to ensure initialization only happens once
_initialized = False
axiom_tracer = None


def _initialize_telemetry():
    """Initialize telemetry once and only once."""
    global _initialized, axiom_tracer

    if _initialized:
        return

    resource = Resource(attributes={SERVICE_NAME: settings.otel_service_name})
    provider = TracerProvider(resource=resource)

    # Spans are only shipped when an OTLP endpoint is configured
    if settings.otel_exporter_endpoint:
        headers = {}
        if settings.otel_exporter_token:
            headers["Authorization"] = f"Bearer {settings.otel_exporter_token}"
        otlp_trace_exporter = OTLPSpanExporter(
            endpoint=settings.otel_exporter_endpoint,
            headers=headers,
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_trace_exporter))

    trace.set_tracer_provider(provider)
    axiom_tracer = trace.get_tracer(settings.otel_service_name)

    _initialized = True
    logging.getLogger(__name__).info(
        "Telemetry initialized",
        extra={"exporter_enabled": bool(settings.otel_exporter_endpoint)},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance. Ensures telemetry is initialized.
    Use this instead of logging.getLogger() directly.
    """
    if not _initialized:
        _initialize_telemetry()
    return logging.getLogger(name)


def _span_name(func, args) -> str:
    span_name = func.__name__
    if args and hasattr(args[0], func.__name__):
        # If it's a method, include class name
        span_name = f"{args[0].__class__.__name__}.{func.__name__}"
    return span_name


def _tracer():
    if not _initialized:
        _initialize_telemetry()
    return axiom_tracer


# Custom decorator for automatic span naming
def trace_span(func):
    """Decorator that automatically creates a span with the function name."""

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        with _tracer().start_as_current_span(_span_name(func, args)):
            return func(*args, **kwargs)

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        with _tracer().start_as_current_span(_span_name(func, args)):
            return await func(*args, **kwargs)

    # Return appropriate wrapper based on function type
    if asyncio.iscoroutinefunction(func):
        return async_wrapper
    else:
        return sync_wrapper


def log_span_event(message: str, attributes: Optional[Dict[str, Any]] = None):
    """
    Log a message as an event in the current span.
    This makes the log appear in the trace view as well as the log stream.
    """
    current_span = trace.get_current_span()
    if current_span and current_span.is_recording():
        current_span.add_event(message, attributes=attributes or {})

    logger = get_logger(__name__)
    logger.info(message, extra=attributes)
