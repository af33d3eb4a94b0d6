from dataclasses import dataclass
from typing import Optional

from ..schemas import ValidatePaymentArrangementRequest


@dataclass(frozen=True)
class RequestParams:
    """Normalized matching inputs for one invocation."""
    identifier: Optional[str]
    code_value: Optional[str]
    number_of_digits: int


def extract_parameters(request: ValidatePaymentArrangementRequest) -> RequestParams:
    """
    Pull identifier, scheme code and identifier length out of the request.

    A missing identifier gives a length of 0. The nested account
    identification structure itself is guaranteed by schema validation.
    """
    account_id = request.account_identification
    identifier = account_id.identifier

    return RequestParams(
        identifier=identifier,
        code_value=account_id.context.code_value,
        number_of_digits=len(identifier) if identifier is not None else 0,
    )
