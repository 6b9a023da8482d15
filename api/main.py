import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.errors import RateLimitExceeded

from common.core.config import settings
from common.core.constants import UNEXPECTED_ERROR_MESSAGE
from common.core.exceptions import AppException, ConfigurationError
from api.routes.router import api_router
from common.providers.rate_limiter.limiter import limiter

# Initialize OpenTelemetry exporter (must be first)
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from common.core.otel_axiom_exporter import (
    _initialize_telemetry,
    get_logger,
)  # noqa


_initialize_telemetry()
# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Get logger
logger = get_logger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request body"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting application...")
    if not settings.stripe_secret_key:
        logger.warning("STRIPE_SECRET_KEY is not set; payment intents will fail")
    yield
    # Shutdown
    logger.info("Shutting down application...")


# Only expose OpenAPI docs in local development
docs_url = "/docs" if settings.docs_enabled else None
redoc_url = "/redoc" if settings.docs_enabled else None
openapi_url = "/openapi.json" if settings.docs_enabled else None

app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    lifespan=lifespan,
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url=openapi_url,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    if isinstance(exc, ConfigurationError):
        # Detail is for operators only
        logger.error(f"Configuration error on {request.url.path}: {exc.message}")
    elif exc.status_code >= 500:
        logger.error(f"Request to {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": exc.public_message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR_MESSAGE})


# Instrument FastAPI with OpenTelemetry
FastAPIInstrumentor.instrument_app(app)

# Add gzip compression middleware
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


# Liveness probe for k8s, kept outside /api
@app.get("/healthz", include_in_schema=False)
async def healthz():
    return {"status": "ok"}
