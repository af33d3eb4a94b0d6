"""
Scenario Table for ValidatePaymentArrangement

Each scenario pairs a GB IBAN (long form, 22 characters) with the domestic
account number embedded in it (short form, 8 digits). A request matching
either form gets the scenario's pre-baked status codes.

Test identifiers:

| Long form              | Short form | Account               | Switching    | Modulus |
|------------------------|------------|-----------------------|--------------|---------|
| GB29NWBK60161331926801 | 31926801   | DOMESTIC_RESTRICTED   | SWITCHED     | PASS    |
| GB94BARC10201530093459 | 30093459   | DOMESTIC_UNRESTRICTED | NOT_SWITCHED | FAILED  |
| GB33BUKB20201555555555 | 55555555   | DOMESTIC_RESTRICTED   | NOT_SWITCHED | FAILED  |
| GB82WEST12345698765432 | 98765432   | DOMESTIC_UNRESTRICTED | SWITCHED     | PASS    |

Any other identifier falls through and the response template defaults are
returned unchanged.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
import logging

from .constants import AccountStatus, SwitchingStatus, ModulusCheckStatus
from .parameters import RequestParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseConfig:
    """Status codes applied to the response template."""
    account_status: AccountStatus
    switching_status: SwitchingStatus
    modulus_check_status: ModulusCheckStatus


@dataclass(frozen=True)
class MatchRule:
    """One identifier/length (and optional scheme code) alternative."""
    identifier: str
    length: int
    code_value: Optional[str] = None  # None matches any code

    def matches(self, params: RequestParams) -> bool:
        if params.number_of_digits != self.length or params.identifier != self.identifier:
            return False
        return self.code_value is None or params.code_value == self.code_value


@dataclass(frozen=True)
class Scenario:
    name: str
    long_form: MatchRule
    short_form: MatchRule
    result: ResponseConfig

    def matches(self, params: RequestParams) -> bool:
        return self.long_form.matches(params) or self.short_form.matches(params)


def _pair(iban: str) -> tuple[MatchRule, MatchRule]:
    """Long and short rules for a GB IBAN; the short form is its account number."""
    account_number = iban[-8:]
    return MatchRule(iban, len(iban)), MatchRule(account_number, len(account_number))


# Evaluated in declaration order; first match wins.
SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        "restricted-switched-pass",
        *_pair("GB29NWBK60161331926801"),
        ResponseConfig(
            AccountStatus.DOMESTIC_RESTRICTED,
            SwitchingStatus.SWITCHED,
            ModulusCheckStatus.PASS,
        ),
    ),
    Scenario(
        "unrestricted-not-switched-failed",
        *_pair("GB94BARC10201530093459"),
        ResponseConfig(
            AccountStatus.DOMESTIC_UNRESTRICTED,
            SwitchingStatus.NOT_SWITCHED,
            ModulusCheckStatus.FAILED,
        ),
    ),
    Scenario(
        "restricted-not-switched-failed",
        *_pair("GB33BUKB20201555555555"),
        ResponseConfig(
            AccountStatus.DOMESTIC_RESTRICTED,
            SwitchingStatus.NOT_SWITCHED,
            ModulusCheckStatus.FAILED,
        ),
    ),
    Scenario(
        "unrestricted-switched-pass",
        *_pair("GB82WEST12345698765432"),
        ResponseConfig(
            AccountStatus.DOMESTIC_UNRESTRICTED,
            SwitchingStatus.SWITCHED,
            ModulusCheckStatus.PASS,
        ),
    ),
)


def find_scenario(
    params: RequestParams,
    scenarios: Sequence[Scenario] = SCENARIOS,
) -> Optional[Scenario]:
    """Return the first scenario matching params, or None."""
    for scenario in scenarios:
        if scenario.matches(params):
            logger.info(
                f"Matched scenario '{scenario.name}' for identifier "
                f"{params.identifier!r} (length {params.number_of_digits})"
            )
            return scenario

    logger.info(
        f"No scenario for identifier {params.identifier!r} "
        f"(length {params.number_of_digits}); template defaults apply"
    )
    return None


def match_scenario(
    params: RequestParams,
    scenarios: Sequence[Scenario] = SCENARIOS,
) -> Optional[ResponseConfig]:
    """
    Classify request parameters against the scenario table.

    Matching is exact and case-sensitive. An unmatched request is a normal
    outcome and returns None.
    """
    scenario = find_scenario(params, scenarios)
    return scenario.result if scenario else None
