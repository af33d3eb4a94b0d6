"""
SOAP 1.1 Envelope Handling

Unwraps inbound envelopes, maps the ValidatePaymentArrangement body onto
the request model and renders SOAP faults. Business logic never touches
the envelope directly; it receives a request model and an OutboundMessage
carrier to write into.
"""

from typing import Optional
import logging

from lxml import etree

from .schemas import ValidatePaymentArrangementRequest

logger = logging.getLogger(__name__)

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP_CONTENT_TYPE = "text/xml; charset=utf-8"

FAULT_CLIENT = "soapenv:Client"
FAULT_SERVER = "soapenv:Server"


class SoapEnvelopeError(ValueError):
    """Inbound message is not a usable SOAP envelope."""


class OutboundMessage:
    """Carrier for the outgoing SOAP message; business rules fill the payload."""

    def __init__(self, content_type: str = SOAP_CONTENT_TYPE):
        self.content_type = content_type
        self.payload: Optional[bytes] = None


def _local(element) -> str:
    return etree.QName(element).localname


def extract_body_payload(xml_content: str | bytes):
    """
    Return the first element inside soap:Body.

    Envelope and Body are located by local name so that SOAP 1.1 and 1.2
    envelopes are both accepted.
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(xml_content, parser)
    except etree.XMLSyntaxError as e:
        raise SoapEnvelopeError(f"XML syntax error: {e}") from e

    if _local(root) != "Envelope":
        raise SoapEnvelopeError(f"Expected SOAP Envelope, got <{_local(root)}>")

    body = next((child for child in root if isinstance(child.tag, str) and _local(child) == "Body"), None)
    if body is None:
        raise SoapEnvelopeError("SOAP Envelope has no Body")

    payload = next((child for child in body if isinstance(child.tag, str)), None)
    if payload is None:
        raise SoapEnvelopeError("SOAP Body is empty")
    return payload


def _child_text(element, *names: str) -> Optional[str]:
    steps = "/".join(f"*[local-name()='{name}']" for name in names)
    nodes = element.xpath(steps)
    if not nodes:
        return None
    # XPath string value: all descendant text, CDATA included, comments excluded
    return str(nodes[0].xpath("string()"))


def parse_request(payload) -> ValidatePaymentArrangementRequest:
    """Map a (schema-valid) ValidatePaymentArrangementRequest element onto the model."""
    return ValidatePaymentArrangementRequest(
        account_identification={
            "identifier": _child_text(payload, "AccountIdentification", "Identifier"),
            "context": {
                "code_value": _child_text(payload, "AccountIdentification", "Context", "CodeValue"),
            },
        }
    )


def build_fault(fault_code: str, fault_string: str, detail: Optional[dict] = None) -> bytes:
    """Render a SOAP 1.1 Fault envelope."""
    envelope = etree.Element(f"{{{SOAP_ENV_NS}}}Envelope", nsmap={"soapenv": SOAP_ENV_NS})
    body = etree.SubElement(envelope, f"{{{SOAP_ENV_NS}}}Body")
    fault = etree.SubElement(body, f"{{{SOAP_ENV_NS}}}Fault")

    # faultcode/faultstring/detail are unqualified in SOAP 1.1
    etree.SubElement(fault, "faultcode").text = fault_code
    etree.SubElement(fault, "faultstring").text = fault_string

    if detail:
        detail_el = etree.SubElement(fault, "detail")
        for key, value in detail.items():
            if isinstance(value, list):
                for item in value:
                    etree.SubElement(detail_el, key).text = str(item)
            else:
                etree.SubElement(detail_el, key).text = str(value)

    return etree.tostring(envelope, xml_declaration=True, encoding="UTF-8")
