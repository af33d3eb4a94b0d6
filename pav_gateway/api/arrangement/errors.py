"""
Error taxonomy for business-rule processing.

Every internal failure carries a FailureKind; the orchestrator re-raises
them as a single BusinessRuleProcessingError.
"""

from enum import Enum


class FailureKind(str, Enum):
    RESOURCE_MISSING = "RESOURCE_MISSING"
    PARSE_FAILURE = "PARSE_FAILURE"
    PATH_EVALUATION_FAILURE = "PATH_EVALUATION_FAILURE"
    SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"
    UNCLASSIFIED = "UNCLASSIFIED"


class ArrangementStubError(Exception):
    """Base class for failures raised inside the core."""

    kind: FailureKind = FailureKind.UNCLASSIFIED


class TemplateNotFoundError(ArrangementStubError):
    kind = FailureKind.RESOURCE_MISSING


class TemplateParseError(ArrangementStubError):
    kind = FailureKind.PARSE_FAILURE


class PathEvaluationError(ArrangementStubError):
    kind = FailureKind.PATH_EVALUATION_FAILURE


class SerializationError(ArrangementStubError):
    kind = FailureKind.SERIALIZATION_FAILURE


class BusinessRuleProcessingError(Exception):
    """Raised by apply_business_rules when a response cannot be produced."""

    def __init__(self, kind: FailureKind, message: str):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message

    def to_dict(self) -> dict:
        """Convert to dictionary for fault details."""
        return {
            "error": "BUSINESS_RULE_PROCESSING_FAILED",
            "kind": self.kind.value,
            "message": self.message,
        }
