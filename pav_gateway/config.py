"""
Gateway configuration.

Values are read from environment variables prefixed with ``PAV_``
(e.g. ``PAV_TEMPLATE_DIR``, ``PAV_OTEL_ENABLED``) or from a local ``.env`` file.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the payment arrangement validation stub."""

    model_config = SettingsConfigDict(
        env_prefix="PAV_",
        env_file=".env",
        extra="ignore",
    )

    # Resources
    template_dir: Optional[str] = Field(None, description="Directory holding response templates")
    response_template: str = Field(
        "validate_payment_arrangement_response.xml",
        description="File name of the ValidatePaymentArrangement response template",
    )
    schema_dir: Optional[str] = Field(None, description="Directory holding request XSD schemas")

    # Inbound schema interceptor
    xsd_validation_enabled: bool = Field(True, description="Validate inbound requests against XSD")

    # Logging
    log_level: str = Field("INFO", description="Root logging level")

    # Tracing
    otel_enabled: bool = Field(False, description="Enable OpenTelemetry tracing")
    otel_service_name: str = Field("pav-gateway", description="Service name reported to the collector")
    otel_exporter_endpoint: str = Field(
        "http://localhost:4318/v1/traces",
        description="OTLP/HTTP traces endpoint",
    )


settings = Settings()
