"""
ValidatePaymentArrangement SOAP Endpoint

Receives a SOAP 1.1 envelope, runs it through the XSD interceptor and
hands the parsed request to the business rules.
"""
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
import logging

from ...config import settings
from .. import soap
from .. import validation as xsd_validation
from ..schemas import ValidationResponse
from .business_rules import apply_business_rules
from .errors import BusinessRuleProcessingError

logger = logging.getLogger(__name__)

router = APIRouter()


def _fault_response(status_code: int, fault_code: str, fault_string: str, detail: dict | None = None) -> Response:
    return Response(
        content=soap.build_fault(fault_code, fault_string, detail),
        status_code=status_code,
        media_type=soap.SOAP_CONTENT_TYPE,
    )


@router.post(
    "/soap/ValidatePaymentArrangement",
    summary="ValidatePaymentArrangement (stub)",
    response_class=Response,
    description="""
    Accepts a SOAP 1.1 ValidatePaymentArrangement request and returns the
    canned response with status codes set by the matching test scenario.

    Identifiers outside the scenario table get the template defaults.
    Every response carries a fresh transaction id.
    """
)
async def validate_payment_arrangement(request: Request) -> Response:
    """
    Steps:
    1. Unwrap the SOAP envelope
    2. Validate the body against the request XSD
    3. Apply business rules
    4. Return the mutated response envelope
    """
    try:
        body = await request.body()
        payload = soap.extract_body_payload(body)
    except soap.SoapEnvelopeError as e:
        logger.warning(f"Rejected request: {e}")
        return _fault_response(400, soap.FAULT_CLIENT, str(e))

    # Schema interceptor
    if settings.xsd_validation_enabled:
        xsd_result = xsd_validation.validate_payment_arrangement_request(payload)
        if not xsd_result.valid:
            logger.warning(f"Request failed XSD validation: {xsd_result.errors}")
            return _fault_response(
                400,
                soap.FAULT_CLIENT,
                "XSD_VALIDATION_FAILED",
                {"error": xsd_result.errors},
            )

    try:
        arrangement_request = soap.parse_request(payload)
    except ValidationError as e:
        logger.warning(f"Request body does not map onto the request model: {e}")
        return _fault_response(
            400,
            soap.FAULT_CLIENT,
            "INVALID_REQUEST",
            {"error": [err["msg"] for err in e.errors()]},
        )

    outbound = soap.OutboundMessage()

    try:
        # Template read is blocking file I/O
        await run_in_threadpool(apply_business_rules, arrangement_request, outbound)
    except BusinessRuleProcessingError as e:
        return _fault_response(500, soap.FAULT_SERVER, "Business rule processing failed", e.to_dict())

    return Response(content=outbound.payload, media_type=outbound.content_type)


@router.post(
    "/soap/validate",
    response_model=ValidationResponse,
    summary="Validate a request envelope against the XSD",
    description="Checks a ValidatePaymentArrangement envelope without applying business rules.",
)
async def validate_request_envelope(request: Request) -> ValidationResponse:
    """Validate a request envelope against the request XSD."""
    try:
        body = await request.body()
        payload = soap.extract_body_payload(body)
    except soap.SoapEnvelopeError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "INVALID_SOAP_ENVELOPE", "message": str(e)}
        )

    result = xsd_validation.validate_payment_arrangement_request(payload)

    return ValidationResponse(**result.to_dict())
