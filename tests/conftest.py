"""
Shared fixtures for the PAV gateway tests.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from lxml import etree

from pav_gateway.api.arrangement.business_rules import TemplateStore, parse_template
from pav_gateway.api.arrangement.samples import build_request_envelope
from pav_gateway.api.schemas import ValidatePaymentArrangementRequest
from pav_gateway.config import settings


@pytest_asyncio.fixture
async def async_client():
    """HTTP client bound to the ASGI app."""
    from pav_gateway.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def template_store() -> TemplateStore:
    """Store backed by the bundled templates."""
    return TemplateStore()


@pytest.fixture
def template_document(template_store: TemplateStore):
    """Freshly parsed response template."""
    return parse_template(template_store.load(settings.response_template))


@pytest.fixture
def make_request():
    """Factory for ValidatePaymentArrangementRequest models."""
    def _make(identifier, code_value="IBAN") -> ValidatePaymentArrangementRequest:
        return ValidatePaymentArrangementRequest(
            account_identification={
                "identifier": identifier,
                "context": {"code_value": code_value},
            }
        )
    return _make


@pytest.fixture
def make_envelope():
    """Factory for SOAP request envelopes."""
    return build_request_envelope


@pytest.fixture
def xpath_text():
    """Text of the first node selected by a local-name XPath."""
    def _text(content, xpath: str):
        if isinstance(content, bytes):
            content = etree.fromstring(content)
        nodes = content.xpath(xpath)
        return nodes[0].text if nodes else None
    return _text
