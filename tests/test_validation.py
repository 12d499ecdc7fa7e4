"""
Tests for input validation and profile guidance.
"""

import pytest

from projection_model.instruments import Instrument
from projection_model.profile import SENIOR_MESSAGE, InvestorProfile, age_message
from projection_model.validation import (
    InputValidator,
    InvalidInputError,
    ValidationResult,
    only_digits,
    parse_amount,
)


class TestValidationResult:
    """Test ValidationResult dataclass."""

    def test_str_pass(self):
        result = ValidationResult(passed=True, message="ok")
        assert str(result) == "✓ PASS: ok"

    def test_str_fail(self):
        result = ValidationResult(passed=False, message="bad", details={'issues': ["x"]})
        assert str(result) == "✗ FAIL: bad"
        assert result.issues == ["x"]

    def test_issues_empty_without_details(self):
        assert ValidationResult(passed=True, message="ok").issues == []


class TestProfileValidation:
    """Name and age rules."""

    @pytest.mark.parametrize("name", ["Jo", "  Jo  ", "A" * 30])
    def test_valid_names(self, name):
        assert InputValidator.validate_profile(name).passed

    @pytest.mark.parametrize("name", ["", "J", "   J   ", "A" * 31, None])
    def test_invalid_names(self, name):
        result = InputValidator.validate_profile(name)
        assert not result.passed
        assert "Name must be 2-30 characters" in result.issues

    @pytest.mark.parametrize("age", [None, 0, 10, 100])
    def test_valid_ages(self, age):
        assert InputValidator.validate_profile("Sari", age).passed

    @pytest.mark.parametrize("age", [9, 101])
    def test_invalid_ages(self, age):
        result = InputValidator.validate_profile("Sari", age)
        assert not result.passed
        assert result.issues == ["Age must be 10-100"]


class TestInstrumentValidation:
    """Instrument selection."""

    def test_missing(self):
        result = InputValidator.validate_instrument(None)
        assert result.issues == ["Choose an instrument first"]

    def test_unknown(self):
        result = InputValidator.validate_instrument("crypto")
        assert not result.passed
        assert "Unknown instrument" in result.issues[0]

    @pytest.mark.parametrize("value", [Instrument.GOLD, "bond"])
    def test_known(self, value):
        assert InputValidator.validate_instrument(value).passed


class TestScenarioNumbers:
    """Principal, duration and investor count ranges."""

    @pytest.mark.parametrize("months", [1, 600])
    def test_duration_bounds_accepted(self, months):
        assert InputValidator.validate_scenario_numbers(1, months, 1).passed

    @pytest.mark.parametrize("months", [0, 601, 12.5, float("inf")])
    def test_duration_out_of_range(self, months):
        result = InputValidator.validate_scenario_numbers(1_000_000, months, 18_000_000)
        assert result.issues == ["Duration must be 1-600 months"]

    @pytest.mark.parametrize("principal", [0, -1, float("nan"), "1000", None, True])
    def test_principal_rejected(self, principal):
        result = InputValidator.validate_scenario_numbers(principal, 12, 18_000_000)
        assert "Principal must be a number > 0" in result.issues

    @pytest.mark.parametrize("investors", [0, 2.5])
    def test_investor_count_rejected(self, investors):
        result = InputValidator.validate_scenario_numbers(1_000_000, 12, investors)
        assert result.issues == ["Investor count must be a whole number > 0"]

    def test_integral_floats_accepted(self):
        assert InputValidator.validate_scenario_numbers(1_000_000, 12.0, 18_000_000.0).passed

    def test_all_issues_reported(self):
        result = InputValidator.validate_scenario_numbers(0, 0, 0)
        assert len(result.issues) == 3


class TestInflationInputs:
    """GDP and productive share ranges."""

    @pytest.mark.parametrize("share", [0.0, 0.7, 1.0])
    def test_share_accepted(self, share):
        assert InputValidator.validate_inflation_inputs(20_000, share).passed

    @pytest.mark.parametrize("share", [-0.1, 1.5])
    def test_share_rejected(self, share):
        result = InputValidator.validate_inflation_inputs(20_000, share)
        assert result.issues == ["Productive share must be between 0 and 1"]

    def test_gdp_rejected(self):
        result = InputValidator.validate_inflation_inputs(0, 0.7)
        assert result.issues == ["GDP must be a number > 0"]


class TestInvalidInputError:
    """Error raised by the engine facade."""

    def test_message_joins_failed_issues(self):
        checks = [
            InputValidator.validate_instrument(Instrument.EQUITY),
            InputValidator.validate_scenario_numbers(0, 12, 1),
            InputValidator.validate_inflation_inputs(20_000, 2.0),
        ]
        error = InvalidInputError(checks)

        assert isinstance(error, ValueError)
        assert len(error.results) == 2
        assert str(error) == "Principal must be a number > 0; Productive share must be between 0 and 1"


class TestAmountParsing:
    """Free-form numeric text."""

    @pytest.mark.parametrize("text,expected", [
        ("1.000.000", "1000000"),
        ("Rp 2,500", "2500"),
        ("abc", ""),
        (None, ""),
        (42, "42"),
    ])
    def test_only_digits(self, text, expected):
        assert only_digits(text) == expected

    def test_parse_amount(self):
        assert parse_amount("Rp 1.000.000") == 1_000_000
        assert parse_amount("") == 0
        assert parse_amount("-5") == 5


class TestAgeMessage:
    """Age-band guidance."""

    @pytest.mark.parametrize("age,snippet", [
        (15, "Earliest start"),
        (18, "young investor"),
        (24, "young investor"),
        (25, "growth and stability"),
        (49, "family protection"),
        (59, "preserving capital"),
    ])
    def test_bands(self, age, snippet):
        assert snippet in age_message(age)

    def test_senior(self):
        assert age_message(60) == SENIOR_MESSAGE
        assert age_message(95) == SENIOR_MESSAGE

    @pytest.mark.parametrize("age", [None, 0])
    def test_no_age(self, age):
        assert age_message(age) == ""

    def test_profile_message(self):
        assert InvestorProfile(name="Sari", age=22).message == age_message(22)
