"""
Centralized Pydantic Schemas for the PAV Gateway

Request models for the ValidatePaymentArrangement operation and response
models for the JSON support endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional


# =============================================================================
# 1. ValidatePaymentArrangement Request
# =============================================================================

class IdentifierContext(BaseModel):
    """Identifier scheme information (e.g. IBAN vs domestic account number)."""
    code_value: str = Field(alias="codeValue")

    class Config:
        populate_by_name = True

class AccountIdentification(BaseModel):
    """Account identifier as supplied by the caller."""
    identifier: Optional[str] = None
    context: IdentifierContext

class ValidatePaymentArrangementRequest(BaseModel):
    """Body of an inbound ValidatePaymentArrangement request."""
    account_identification: AccountIdentification = Field(alias="accountIdentification")

    class Config:
        populate_by_name = True


# =============================================================================
# 2. Scenario Catalogue
# =============================================================================

class ScenarioInfo(BaseModel):
    """One row of the fixed scenario table."""
    name: str
    long_form_identifier: str = Field(alias="longFormIdentifier")
    short_form_identifier: str = Field(alias="shortFormIdentifier")
    account_status: str = Field(alias="accountStatus")
    switching_status: str = Field(alias="switchingStatus")
    modulus_check_status: str = Field(alias="modulusCheckStatus")

    class Config:
        populate_by_name = True

class ScenariosResponse(BaseModel):
    """Response from GET /v1/scenarios."""
    scenarios: list[ScenarioInfo]
    total: int


# =============================================================================
# 3. Samples & Validation
# =============================================================================

class SampleRequest(BaseModel):
    """Sample SOAP request envelope."""
    name: str
    description: str
    scenario: Optional[str] = None
    sample_xml: str

class ValidationResponse(BaseModel):
    """Response from the XSD schema validation endpoint."""
    valid: bool
    messageType: Optional[str] = None
    errors: list[str] = []
    warnings: list[str] = []
