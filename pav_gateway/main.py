"""
Payment Arrangement Validation Stub - Main Application

Serves a stub for the ValidatePaymentArrangement SOAP operation. Requests
are classified against a fixed table of test accounts and answered with a
canned response whose status fields reflect the matched scenario.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from pav_gateway.api import arrangement, health
from pav_gateway.api import validation as xsd_validation
from pav_gateway.config import settings
from pav_gateway.observability import setup_tracing

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle.

    Startup:
    - Compile the request XSD so schema problems surface immediately
    """
    if settings.xsd_validation_enabled:
        health_info = xsd_validation.get_validation_health()
        if health_info["schemaLoadErrors"]:
            logger.error(f"Schema load errors: {health_info['schemaLoadErrors']}")

    yield


app = FastAPI(
    title="Payment Arrangement Validation Stub",
    description="""
Stub responder for the **ValidatePaymentArrangement** SOAP operation.

### Test accounts

| Long form | Short form | Account | Switching | Modulus |
|-----------|------------|---------|-----------|---------|
| GB29NWBK60161331926801 | 31926801 | DOMESTIC_RESTRICTED | SWITCHED | PASS |
| GB94BARC10201530093459 | 30093459 | DOMESTIC_UNRESTRICTED | NOT_SWITCHED | FAILED |
| GB33BUKB20201555555555 | 55555555 | DOMESTIC_RESTRICTED | NOT_SWITCHED | FAILED |
| GB82WEST12345698765432 | 98765432 | DOMESTIC_UNRESTRICTED | SWITCHED | PASS |

Any other identifier returns the template defaults with a fresh transaction id.

⚠️ **Disclaimer**: No real account validation is performed.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=[
        {
            "name": "Health",
            "description": "Service health and readiness probes",
        },
        {
            "name": "Payment Arrangement",
            "description": "ValidatePaymentArrangement stub, scenario catalogue and sample requests.",
        },
    ],
    lifespan=lifespan,
)

# Setup OpenTelemetry tracing
if settings.otel_enabled:
    setup_tracing(app)
    FastAPIInstrumentor.instrument_app(app)

# =============================================================================
# API Routes
# =============================================================================

# Health check (not versioned)
app.include_router(health.router, tags=["Health"])

app.include_router(arrangement.router)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Payment Arrangement Validation Stub",
        "version": "1.0.0",
        "documentation": "/docs",
        "operation": "/v1/soap/ValidatePaymentArrangement",
        "status": "stub",
    }
