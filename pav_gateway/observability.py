"""
OpenTelemetry tracing setup.

Only installed when ``settings.otel_enabled`` is set; otherwise the
``opentelemetry.trace`` API falls back to its no-op tracer.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .config import settings

logger = logging.getLogger(__name__)


def setup_tracing(app: FastAPI) -> TracerProvider:
    """Install a global tracer provider exporting spans over OTLP/HTTP."""
    resource = Resource.create({SERVICE_NAME: settings.otel_service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otel_exporter_endpoint))
    )
    trace.set_tracer_provider(provider)

    logger.info(
        f"Tracing enabled for {app.title}: exporting to {settings.otel_exporter_endpoint}"
    )
    return provider
