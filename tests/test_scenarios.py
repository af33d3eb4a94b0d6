"""
Unit tests for parameter extraction and scenario matching.
"""

import pytest

from pav_gateway.api.arrangement import (
    SCENARIOS,
    AccountStatus,
    MatchRule,
    ModulusCheckStatus,
    RequestParams,
    ResponseConfig,
    Scenario,
    SwitchingStatus,
    extract_parameters,
    match_scenario,
)


def params(identifier, code_value="IBAN") -> RequestParams:
    return RequestParams(
        identifier=identifier,
        code_value=code_value,
        number_of_digits=len(identifier) if identifier is not None else 0,
    )


class TestExtractParameters:
    """Test request parameter extraction."""

    def test_extracts_identifier_code_and_length(self, make_request):
        result = extract_parameters(make_request("GB29NWBK60161331926801", "IBAN"))

        assert result.identifier == "GB29NWBK60161331926801"
        assert result.code_value == "IBAN"
        assert result.number_of_digits == 22

    def test_missing_identifier_has_zero_length(self, make_request):
        result = extract_parameters(make_request(None, "BBAN"))

        assert result.identifier is None
        assert result.code_value == "BBAN"
        assert result.number_of_digits == 0

    def test_empty_identifier_has_zero_length(self, make_request):
        result = extract_parameters(make_request(""))
        assert result.identifier == ""
        assert result.number_of_digits == 0


class TestScenarioTable:
    """Test the fixed scenario table."""

    def test_table_has_four_scenarios(self):
        assert len(SCENARIOS) == 4

    @pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.name)
    def test_long_and_short_forms_give_same_config(self, scenario: Scenario):
        long_result = match_scenario(params(scenario.long_form.identifier))
        short_result = match_scenario(params(scenario.short_form.identifier, "BBAN"))

        assert long_result is not None
        assert long_result == short_result == scenario.result

    @pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.name)
    def test_short_form_is_iban_account_number(self, scenario: Scenario):
        assert scenario.long_form.length == 22
        assert scenario.short_form.length == 8
        assert scenario.long_form.identifier.endswith(scenario.short_form.identifier)

    def test_scenarios_cover_account_and_switching_combinations(self):
        combos = {(s.result.account_status, s.result.switching_status) for s in SCENARIOS}
        assert combos == {
            (AccountStatus.DOMESTIC_RESTRICTED, SwitchingStatus.SWITCHED),
            (AccountStatus.DOMESTIC_RESTRICTED, SwitchingStatus.NOT_SWITCHED),
            (AccountStatus.DOMESTIC_UNRESTRICTED, SwitchingStatus.SWITCHED),
            (AccountStatus.DOMESTIC_UNRESTRICTED, SwitchingStatus.NOT_SWITCHED),
        }


class TestMatchScenario:
    """Test first-match-wins exact matching."""

    expected = ResponseConfig(
        AccountStatus.DOMESTIC_RESTRICTED,
        SwitchingStatus.SWITCHED,
        ModulusCheckStatus.PASS,
    )

    def test_iban_matches_restricted_switched_pass(self):
        assert match_scenario(params("GB29NWBK60161331926801")) == self.expected

    def test_account_number_matches_restricted_switched_pass(self):
        assert match_scenario(params("31926801", "BBAN")) == self.expected

    def test_unknown_identifier_returns_none(self):
        assert match_scenario(params("99999999", "BBAN")) is None

    def test_missing_identifier_returns_none(self):
        assert match_scenario(params(None)) is None

    def test_matching_is_case_sensitive(self):
        assert match_scenario(params("gb29nwbk60161331926801")) is None

    def test_matching_does_not_trim(self):
        assert match_scenario(params(" 31926801")) is None
        assert match_scenario(params("31926801 ")) is None

    def test_length_must_agree_with_identifier(self):
        inconsistent = RequestParams(identifier="31926801", code_value="BBAN", number_of_digits=22)
        assert match_scenario(inconsistent) is None

    def test_default_table_ignores_code_value(self):
        assert match_scenario(params("31926801", "SOMETHING_ELSE")) == self.expected

    def test_first_matching_scenario_wins(self):
        first = ResponseConfig(AccountStatus.DOMESTIC_RESTRICTED, SwitchingStatus.SWITCHED, ModulusCheckStatus.PASS)
        second = ResponseConfig(AccountStatus.DOMESTIC_UNRESTRICTED, SwitchingStatus.NOT_SWITCHED, ModulusCheckStatus.FAILED)
        overlapping = (
            Scenario("first", MatchRule("AAAA1111", 8), MatchRule("12345678", 8), first),
            Scenario("second", MatchRule("BBBB2222", 8), MatchRule("12345678", 8), second),
        )

        assert match_scenario(params("12345678"), overlapping) == first
        assert match_scenario(params("12345678"), tuple(reversed(overlapping))) == second

    def test_code_value_constraint(self):
        config = ResponseConfig(AccountStatus.DOMESTIC_RESTRICTED, SwitchingStatus.SWITCHED, ModulusCheckStatus.FAILED)
        table = (
            Scenario(
                "coded",
                MatchRule("GB00TEST00000012345678", 22, code_value="IBAN"),
                MatchRule("12345678", 8, code_value="BBAN"),
                config,
            ),
        )

        assert match_scenario(params("12345678", "BBAN"), table) == config
        assert match_scenario(params("12345678", "IBAN"), table) is None
        assert match_scenario(params("GB00TEST00000012345678", "IBAN"), table) == config
