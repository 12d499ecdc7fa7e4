"""
Reusable UI-facing helpers that keep the controllers focused on rendering.
"""

from __future__ import annotations

from typing import Any

from projection_model.adjustments import WhatIfToggles
from projection_model.engine import ScenarioInput
from projection_model.inflation import InflationSimInput
from projection_model.profile import InvestorProfile
from projection_model.validation import InputValidator, parse_amount


def parse_scenario_numbers(scenario_inputs: dict[str, Any]) -> dict[str, int]:
    """
    Sanitize the free-text numeric fields into integers (blank -> 0).
    """
    return {
        "principal": parse_amount(scenario_inputs.get("principal_text")),
        "duration_months": parse_amount(scenario_inputs.get("months_text")),
        "investor_count": parse_amount(scenario_inputs.get("investors_text")),
    }


def collect_input_errors(profile_inputs: dict[str, Any], scenario_inputs: dict[str, Any]) -> list[str]:
    """
    Run every validator over the raw form values and flatten the issues.
    """
    numbers = parse_scenario_numbers(scenario_inputs)
    checks = [
        InputValidator.validate_profile(profile_inputs.get("name"), profile_inputs.get("age")),
        InputValidator.validate_instrument(scenario_inputs.get("instrument")),
        InputValidator.validate_scenario_numbers(
            numbers["principal"], numbers["duration_months"], numbers["investor_count"]
        ),
        InputValidator.validate_inflation_inputs(
            scenario_inputs.get("gdp_trillion"), scenario_inputs.get("productive_share")
        ),
    ]
    return [issue for check in checks if not check.passed for issue in check.issues]


def build_scenario_input(scenario_inputs: dict[str, Any]) -> ScenarioInput:
    """
    Build the immutable engine snapshot from validated form values.
    """
    numbers = parse_scenario_numbers(scenario_inputs)
    toggles = scenario_inputs.get("toggles", {})
    return ScenarioInput(
        instrument=scenario_inputs["instrument"],
        principal=numbers["principal"],
        duration_months=numbers["duration_months"],
        investor_count=numbers["investor_count"],
        toggles=WhatIfToggles(
            inflation_up=bool(toggles.get("inflation_up")),
            rate_cut_down=bool(toggles.get("rate_cut_down")),
            index_up=bool(toggles.get("index_up")),
        ),
        inflation=InflationSimInput(
            gdp_trillion=float(scenario_inputs["gdp_trillion"]),
            productive_share=float(scenario_inputs["productive_share"]),
        ),
    )


def build_profile(profile_inputs: dict[str, Any]) -> InvestorProfile:
    return InvestorProfile(
        name=(profile_inputs.get("name") or "").strip(),
        age=profile_inputs.get("age") or None,
        occupation=(profile_inputs.get("occupation") or "").strip(),
    )
