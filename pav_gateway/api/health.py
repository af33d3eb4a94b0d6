from fastapi import APIRouter
import time

from ..config import settings
from . import validation as xsd_validation
from .arrangement.business_rules import get_template_store

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint for container orchestration.

    Returns basic health status of the gateway.
    """
    return {
        "status": "healthy",
        "service": "pav-gateway",
        "timestamp": time.time()
    }


@router.get("/health/ready")
async def readiness_check():
    """
    Readiness check - verifies bundled resources are available.
    """
    checks = {
        "template": "fail",
        "schema": "fail",
    }

    if get_template_store().exists(settings.response_template):
        checks["template"] = "ok"

    if not settings.xsd_validation_enabled or xsd_validation.get_validation_health()["schemasTotal"] > 0:
        checks["schema"] = "ok"

    status = "ready" if all(v == "ok" for v in checks.values()) else "not_ready"

    return {
        "status": status,
        "checks": checks
    }


@router.get("/health/schemas")
async def get_schema_health() -> dict:
    """Get health status of schema validation system."""
    return xsd_validation.get_validation_health()
