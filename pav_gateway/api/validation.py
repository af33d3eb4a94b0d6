"""
XSD Schema Validation Module

Inbound requests are validated against the bundled request schema before
any business rule runs. This is the only place request structure is
checked; the business rules assume a schema-valid request.

Schemas loaded from: pav_gateway/resources/xsd/
"""

import copy
from pathlib import Path
from typing import Optional
from lxml import etree
import logging

from ..config import settings

logger = logging.getLogger(__name__)

MSG_VALIDATE_PAYMENT_ARRANGEMENT = "ValidatePaymentArrangementRequest"

BUNDLED_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "resources" / "xsd"


# =============================================================================
# Schema Registry
# =============================================================================

class SchemaRegistry:
    """
    Manages request XSD schemas.

    Loads schemas on first use and caches compiled validators.
    """

    def __init__(self, schema_dir: Optional[str] = None):
        """
        Initialize schema registry.

        Args:
            schema_dir: Path to XSD schema directory.
                       Resolution order:
                       1. Explicit schema_dir parameter
                       2. settings.schema_dir (PAV_SCHEMA_DIR)
                       3. Schemas bundled with the package
        """
        if schema_dir is None:
            schema_dir = settings.schema_dir

        self.schema_dir = Path(schema_dir) if schema_dir else BUNDLED_SCHEMA_DIR
        self._schemas: dict[str, etree.XMLSchema] = {}
        self._load_errors: dict[str, str] = {}

        self._load_schemas()

    def _load_schemas(self):
        """Load all XSD schemas from the schema directory."""
        if not self.schema_dir.exists():
            logger.warning(f"Schema directory not found: {self.schema_dir}")

        schema_files = {
            MSG_VALIDATE_PAYMENT_ARRANGEMENT: "validate_payment_arrangement_request.xsd",
        }

        for msg_type, filename in schema_files.items():
            schema_path = self.schema_dir / filename
            if not schema_path.exists():
                self._load_errors[msg_type] = f"File not found: {schema_path}"
                logger.warning(f"Schema not found: {schema_path}")
                continue
            try:
                schema_doc = etree.parse(str(schema_path))
                self._schemas[msg_type] = etree.XMLSchema(schema_doc)
                logger.info(f"Loaded schema: {msg_type} from {filename}")
            except (etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
                self._load_errors[msg_type] = str(e)
                logger.error(f"Failed to load schema {msg_type}: {e}")

    def get_schema(self, msg_type: str) -> Optional[etree.XMLSchema]:
        """Get compiled XML schema for a message type."""
        return self._schemas.get(msg_type)

    def is_loaded(self, msg_type: str) -> bool:
        return msg_type in self._schemas

    def get_loaded_schemas(self) -> list[str]:
        return list(self._schemas.keys())

    def get_load_errors(self) -> dict[str, str]:
        return self._load_errors.copy()


# =============================================================================
# Global Schema Registry Instance
# =============================================================================

# Lazy initialization to avoid import-time errors
_registry: Optional[SchemaRegistry] = None


def get_registry() -> SchemaRegistry:
    """Get or create the global schema registry."""
    global _registry
    if _registry is None:
        _registry = SchemaRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the cached registry so the next call reloads schemas."""
    global _registry
    _registry = None


# =============================================================================
# Validation Functions
# =============================================================================

class ValidationResult:
    """Result of XSD schema validation."""

    def __init__(
        self,
        valid: bool,
        message_type: str,
        errors: Optional[list[str]] = None,
        warnings: Optional[list[str]] = None
    ):
        self.valid = valid
        self.message_type = message_type
        self.errors = errors or []
        self.warnings = warnings or []

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "valid": self.valid,
            "messageType": self.message_type,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def validate_element(element, msg_type: str) -> ValidationResult:
    """
    Validate an already-parsed element (e.g. a SOAP Body payload).

    The element is copied into its own document so it is validated as a
    root, independent of the surrounding envelope.
    """
    registry = get_registry()

    if not registry.is_loaded(msg_type):
        return ValidationResult(
            valid=False,
            message_type=msg_type,
            errors=[f"Schema not loaded for {msg_type}"],
            warnings=[f"Schema load error: {registry.get_load_errors().get(msg_type, 'Unknown')}"]
        )

    schema = registry.get_schema(msg_type)
    document = etree.ElementTree(copy.deepcopy(element))

    if schema.validate(document):
        return ValidationResult(valid=True, message_type=msg_type)

    errors = [str(error) for error in schema.error_log]
    return ValidationResult(
        valid=False,
        message_type=msg_type,
        errors=errors[:10]  # Limit to first 10 errors
    )


def validate_payment_arrangement_request(element) -> ValidationResult:
    """Validate a ValidatePaymentArrangementRequest body element."""
    return validate_element(element, MSG_VALIDATE_PAYMENT_ARRANGEMENT)


# =============================================================================
# Health Check
# =============================================================================

def get_validation_health() -> dict:
    """Get health status of schema validation system."""
    registry = get_registry()

    loaded = registry.get_loaded_schemas()
    errors = registry.get_load_errors()

    return {
        "status": "healthy" if len(loaded) > 0 else "degraded",
        "enabled": settings.xsd_validation_enabled,
        "schemasLoaded": loaded,
        "schemasTotal": len(loaded),
        "schemaLoadErrors": errors,
        "schemaDirectory": str(registry.schema_dir),
    }
