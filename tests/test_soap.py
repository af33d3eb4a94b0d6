"""
Unit tests for SOAP envelope handling and sample envelopes.
"""

import pytest
from lxml import etree

from pav_gateway.api import validation as xsd_validation
from pav_gateway.api.arrangement.samples import build_request_envelope
from pav_gateway.api.soap import extract_body_payload, parse_request
from pav_gateway.config import settings


def envelope(account_identification: str) -> bytes:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/"
                  xmlns:pav="urn:pav:paymentarrangement:validation:v1">
  <soapenv:Body>
    <pav:ValidatePaymentArrangementRequest>
      <pav:AccountIdentification>{account_identification}</pav:AccountIdentification>
    </pav:ValidatePaymentArrangementRequest>
  </soapenv:Body>
</soapenv:Envelope>""".encode()


class TestParseRequest:
    """Test mapping the SOAP body onto the request model."""

    def test_plain_values(self):
        request = parse_request(extract_body_payload(envelope(
            "<pav:Identifier>31926801</pav:Identifier>"
            "<pav:Context><pav:CodeValue>BBAN</pav:CodeValue></pav:Context>"
        )))

        assert request.account_identification.identifier == "31926801"
        assert request.account_identification.context.code_value == "BBAN"

    def test_comment_inside_value_is_ignored(self):
        request = parse_request(extract_body_payload(envelope(
            "<pav:Identifier>3192<!--c-->6801</pav:Identifier>"
            "<pav:Context><pav:CodeValue>BB<!--c-->AN</pav:CodeValue></pav:Context>"
        )))

        assert request.account_identification.identifier == "31926801"
        assert request.account_identification.context.code_value == "BBAN"

    def test_cdata_inside_value_is_kept(self):
        request = parse_request(extract_body_payload(envelope(
            "<pav:Identifier>GB29NWBK<![CDATA[60161331926801]]></pav:Identifier>"
            "<pav:Context><pav:CodeValue><![CDATA[IBAN]]></pav:CodeValue></pav:Context>"
        )))

        assert request.account_identification.identifier == "GB29NWBK60161331926801"
        assert request.account_identification.context.code_value == "IBAN"

    def test_absent_identifier_is_none(self):
        request = parse_request(extract_body_payload(envelope(
            "<pav:Context><pav:CodeValue>BBAN</pav:CodeValue></pav:Context>"
        )))

        assert request.account_identification.identifier is None


class TestBuildRequestEnvelope:
    """Test sample envelope rendering."""

    def test_values_are_escaped(self):
        xml = build_request_envelope("<&'\">", "A&B")

        request = parse_request(extract_body_payload(xml))
        assert request.account_identification.identifier == "<&'\">"
        assert request.account_identification.context.code_value == "A&B"

    def test_omits_identifier_when_none(self):
        xml = build_request_envelope(None, "BBAN")

        root = etree.fromstring(xml.encode())
        assert not root.xpath("//*[local-name()='Identifier']")


class TestSchemaRegistry:
    """Test schema directory resolution."""

    @pytest.fixture
    def fresh_registry(self):
        xsd_validation.reset_registry()
        yield
        xsd_validation.reset_registry()

    def test_missing_schema_dir_degrades(self, fresh_registry, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "schema_dir", str(tmp_path))

        health = xsd_validation.get_validation_health()
        assert health["status"] == "degraded"
        assert health["schemaDirectory"] == str(tmp_path)

        result = xsd_validation.validate_payment_arrangement_request(
            extract_body_payload(build_request_envelope("31926801", "BBAN"))
        )
        assert result.valid is False
        assert result.to_dict()["errors"] == ["Schema not loaded for ValidatePaymentArrangementRequest"]

    def test_bundled_schemas_load(self, fresh_registry):
        health = xsd_validation.get_validation_health()

        assert health["status"] == "healthy"
        assert health["schemasLoaded"] == ["ValidatePaymentArrangementRequest"]
