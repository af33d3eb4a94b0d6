"""
Scenario Catalogue and Sample Requests

Read-only views of the scenario table plus ready-made request envelopes
for client developers wiring up against the stub.
"""

from fastapi import APIRouter
from typing import Dict, Optional

from lxml import etree

from ..schemas import SampleRequest, ScenarioInfo, ScenariosResponse
from ..soap import SOAP_ENV_NS
from .constants import CODE_BBAN, CODE_IBAN, PAV_NS
from .scenarios import SCENARIOS

router = APIRouter()

UNMATCHED_IDENTIFIER = "99999999"


def build_request_envelope(identifier: Optional[str], code_value: str) -> str:
    """Render a ValidatePaymentArrangement request envelope; values are XML-escaped."""
    soap_ns, pav_ns = f"{{{SOAP_ENV_NS}}}", f"{{{PAV_NS}}}"

    envelope = etree.Element(f"{soap_ns}Envelope", nsmap={"soapenv": SOAP_ENV_NS, "pav": PAV_NS})
    etree.SubElement(envelope, f"{soap_ns}Header")
    body = etree.SubElement(envelope, f"{soap_ns}Body")
    request = etree.SubElement(body, f"{pav_ns}ValidatePaymentArrangementRequest")
    account_id = etree.SubElement(request, f"{pav_ns}AccountIdentification")
    if identifier is not None:
        etree.SubElement(account_id, f"{pav_ns}Identifier").text = identifier
    context = etree.SubElement(account_id, f"{pav_ns}Context")
    etree.SubElement(context, f"{pav_ns}CodeValue").text = code_value

    xml = etree.tostring(envelope, encoding="unicode", pretty_print=True)
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{xml}'


def _build_samples() -> Dict[str, SampleRequest]:
    samples: Dict[str, SampleRequest] = {}
    for scenario in SCENARIOS:
        samples[f"{scenario.name}.long"] = SampleRequest(
            name=f"{scenario.name} (IBAN)",
            description=f"Long-form identifier {scenario.long_form.identifier}.",
            scenario=scenario.name,
            sample_xml=build_request_envelope(scenario.long_form.identifier, CODE_IBAN),
        )
        samples[f"{scenario.name}.short"] = SampleRequest(
            name=f"{scenario.name} (account number)",
            description=f"Short-form identifier {scenario.short_form.identifier}.",
            scenario=scenario.name,
            sample_xml=build_request_envelope(scenario.short_form.identifier, CODE_BBAN),
        )

    samples["unmatched"] = SampleRequest(
        name="Unknown account",
        description="Identifier outside the scenario table; template defaults are returned.",
        sample_xml=build_request_envelope(UNMATCHED_IDENTIFIER, CODE_BBAN),
    )
    return samples


SAMPLES: Dict[str, SampleRequest] = _build_samples()


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/scenarios",
    response_model=ScenariosResponse,
    summary="List test scenarios",
    description="The fixed scenario table, in evaluation order.",
)
async def list_scenarios() -> ScenariosResponse:
    scenarios = [
        ScenarioInfo(
            name=s.name,
            long_form_identifier=s.long_form.identifier,
            short_form_identifier=s.short_form.identifier,
            account_status=s.result.account_status.value,
            switching_status=s.result.switching_status.value,
            modulus_check_status=s.result.modulus_check_status.value,
        )
        for s in SCENARIOS
    ]
    return ScenariosResponse(scenarios=scenarios, total=len(scenarios))


@router.get(
    "/samples",
    response_model=Dict[str, SampleRequest],
    summary="Get sample request envelopes",
    description="Sample ValidatePaymentArrangement requests for every scenario.",
)
async def get_samples() -> Dict[str, SampleRequest]:
    """Get all sample request envelopes."""
    return SAMPLES
