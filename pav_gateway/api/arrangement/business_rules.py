"""
ValidatePaymentArrangement Business Rules

Entry point that turns a validated request into a stub response:

1. Load the bundled response template (fresh on every call)
2. Parse it with lxml
3. Extract identifier, scheme code and identifier length
4. Match against the fixed scenario table
5. Generate a transaction id (always)
6. Write the transaction id and matched status codes into the template
7. Serialize into the caller's outbound message

Precondition: the request has already passed XSD validation in the
transport layer. Nothing here re-validates the request structure.
"""

from pathlib import Path
from typing import Optional
import logging

from lxml import etree
from opentelemetry import trace

from ...config import settings
from ..schemas import ValidatePaymentArrangementRequest
from ..soap import OutboundMessage
from .errors import (
    ArrangementStubError,
    BusinessRuleProcessingError,
    FailureKind,
    SerializationError,
    TemplateNotFoundError,
    TemplateParseError,
)
from .mutator import apply_response_config
from .parameters import extract_parameters
from .scenarios import find_scenario
from .transaction_id import generate_transaction_id

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "resources" / "templates"


# =============================================================================
# Template Store
# =============================================================================

class TemplateStore:
    """
    Reads response templates from disk.

    Templates are read on every call; nothing is cached, so concurrent
    requests never share a document.
    """

    def __init__(self, template_dir: Optional[str] = None):
        """
        Args:
            template_dir: Directory holding templates.
                       Resolution order:
                       1. Explicit template_dir parameter
                       2. settings.template_dir (PAV_TEMPLATE_DIR)
                       3. Templates bundled with the package
        """
        if template_dir is None:
            template_dir = settings.template_dir
        self.template_dir = Path(template_dir) if template_dir else BUNDLED_TEMPLATE_DIR

    def path_for(self, name: str) -> Path:
        return self.template_dir / name

    def load(self, name: str) -> bytes:
        """Return the raw bytes of a template."""
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except OSError as e:
            raise TemplateNotFoundError(f"Template not readable: {path} ({e})") from e

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()


def get_template_store() -> TemplateStore:
    """Template store honouring the current settings."""
    return TemplateStore()


# =============================================================================
# Parse / Serialize
# =============================================================================

def parse_template(content: bytes):
    """Parse template bytes into an element tree."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.ElementTree(etree.fromstring(content, parser))
    except etree.XMLSyntaxError as e:
        raise TemplateParseError(f"Template is not well-formed XML: {e}") from e


def serialize_document(document) -> bytes:
    try:
        return etree.tostring(document, xml_declaration=True, encoding="UTF-8")
    except (etree.SerialisationError, TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize response: {e}") from e


# =============================================================================
# Business Rules
# =============================================================================

def apply_business_rules(
    request: ValidatePaymentArrangementRequest,
    outbound_message: OutboundMessage,
    template_store: Optional[TemplateStore] = None,
) -> None:
    """
    Build the stub response for a ValidatePaymentArrangement request.

    The outbound message payload is replaced only once the whole response
    has been produced.

    Raises:
        BusinessRuleProcessingError: on any failure, classified by FailureKind
    """
    store = template_store or get_template_store()

    with tracer.start_as_current_span("pav.apply_business_rules") as span:
        try:
            document = parse_template(store.load(settings.response_template))

            params = extract_parameters(request)
            scenario = find_scenario(params)
            config = scenario.result if scenario else None
            transaction_id = generate_transaction_id()

            span.set_attribute("pav.scenario", scenario.name if scenario else "none")
            span.set_attribute("pav.transaction_id", transaction_id)

            apply_response_config(document, config, transaction_id)
            payload = serialize_document(document)

        except ArrangementStubError as e:
            logger.error(f"Business rule processing failed ({e.kind.value}): {e}", exc_info=True)
            raise BusinessRuleProcessingError(e.kind, str(e)) from e
        except Exception as e:
            logger.error(f"Unexpected business rule failure: {e}", exc_info=True)
            raise BusinessRuleProcessingError(FailureKind.UNCLASSIFIED, str(e)) from e

    outbound_message.payload = payload
    logger.info(
        f"Response {transaction_id} built "
        f"(scenario: {scenario.name if scenario else 'none'}, {len(payload)} bytes)"
    )
