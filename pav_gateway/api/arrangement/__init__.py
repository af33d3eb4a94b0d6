"""
ValidatePaymentArrangement Package

Stub implementation of the payment arrangement validation operation.

Structure:
- constants.py: Status code enums, namespaces, transaction id format
- errors.py: Failure taxonomy
- parameters.py: Request parameter extraction
- scenarios.py: Fixed scenario table and matcher
- transaction_id.py: Transaction id generation
- mutator.py: Response template mutation
- business_rules.py: apply_business_rules entry point
- endpoint.py: SOAP endpoint
- samples.py: Scenario catalogue and sample requests
"""

from .constants import (
    PAV_NS,
    TRANSACTION_ID_PREFIX,
    TRANSACTION_ID_SUFFIX,
    TRANSACTION_ID_LENGTH,
    CODE_IBAN,
    CODE_BBAN,
    AccountStatus,
    SwitchingStatus,
    ModulusCheckStatus,
)
from .errors import (
    FailureKind,
    ArrangementStubError,
    TemplateNotFoundError,
    TemplateParseError,
    PathEvaluationError,
    SerializationError,
    BusinessRuleProcessingError,
)
from .parameters import RequestParams, extract_parameters
from .scenarios import ResponseConfig, MatchRule, Scenario, SCENARIOS, find_scenario, match_scenario
from .transaction_id import generate_transaction_id
from .mutator import TARGET_PATHS, apply_response_config
from .business_rules import TemplateStore, apply_business_rules

from . import endpoint, samples

__all__ = [
    # Constants
    "PAV_NS",
    "TRANSACTION_ID_PREFIX",
    "TRANSACTION_ID_SUFFIX",
    "TRANSACTION_ID_LENGTH",
    "CODE_IBAN",
    "CODE_BBAN",
    "AccountStatus",
    "SwitchingStatus",
    "ModulusCheckStatus",
    # Errors
    "FailureKind",
    "ArrangementStubError",
    "TemplateNotFoundError",
    "TemplateParseError",
    "PathEvaluationError",
    "SerializationError",
    "BusinessRuleProcessingError",
    # Core
    "RequestParams",
    "extract_parameters",
    "ResponseConfig",
    "MatchRule",
    "Scenario",
    "SCENARIOS",
    "find_scenario",
    "match_scenario",
    "generate_transaction_id",
    "TARGET_PATHS",
    "apply_response_config",
    "TemplateStore",
    "apply_business_rules",
    # Routers
    "endpoint",
    "samples",
    "router",  # Combined router
]

# Create combined router for the arrangement endpoints
from fastapi import APIRouter

router = APIRouter(prefix="/v1", tags=["Payment Arrangement"])

router.include_router(endpoint.router, tags=["SOAP"])
router.include_router(samples.router, tags=["Scenarios"])
