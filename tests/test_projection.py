"""
Tests for scenario projection.

Tests cover:
- Compounding of each scenario
- Derived monthly and annualized rates
- Preconditions (no result instead of stale output)
- Monotonicity, idempotence and duration boundaries
"""

import math

import pytest

from projection_model.adjustments import WhatIfToggles, adjusted_rate
from projection_model.instruments import Instrument, RateTriple, Scenario, base_rate
from projection_model.projection import (
    ScenarioResult,
    beats_inflation,
    future_value,
    project,
    scenario_change_pct,
)


EQUITY = base_rate(Instrument.EQUITY)


class TestProjectExamples:
    """Worked examples for one million in equity over twelve months."""

    def test_no_toggles(self):
        result = project(EQUITY, 1_000_000, 12)

        assert result.optimistic_value == pytest.approx(1_195_618, abs=1)
        assert result.moderate_value == pytest.approx(1_000_000 * 1.008 ** 12)
        assert result.moderate_value == pytest.approx(1_100_339, abs=1)
        assert result.pessimistic_value == pytest.approx(886_385, abs=1)

    def test_inflation_shock(self):
        rates = adjusted_rate(Instrument.EQUITY, WhatIfToggles(inflation_up=True))
        result = project(rates, 1_000_000, 12)

        assert result.moderate_value == pytest.approx(1_074_424, abs=1)

    def test_annualized_rate(self):
        result = project(EQUITY, 1_000_000, 12)
        assert result.moderate_annualized_rate_pct == pytest.approx((1.008 ** 12 - 1) * 100)

    def test_monthly_rate_recovers_moderate_rate(self):
        result = project(EQUITY, 1_000_000, 36)
        assert result.moderate_monthly_rate_pct == pytest.approx(0.8, rel=1e-9)


class TestProjectProperties:
    """Structural properties of the projection."""

    def test_single_month_is_exact(self):
        principal = 2_500_000
        result = project(EQUITY, principal, 1)

        assert result.optimistic_value == principal * (1 + EQUITY.optimistic)
        assert result.moderate_value == principal * (1 + EQUITY.moderate)
        assert result.pessimistic_value == principal * (1 + EQUITY.pessimistic)

    def test_pessimistic_not_floored(self):
        result = project(EQUITY, 1_000_000, 120)
        assert 0 < result.pessimistic_value < 1_000_000

    def test_full_loss_rate_is_representable(self):
        rates = RateTriple(optimistic=0.0, moderate=0.0, pessimistic=-0.99)
        result = project(rates, 1_000_000, 600)
        assert result.pessimistic_value >= 0

    @pytest.mark.parametrize("scenario", list(Scenario))
    def test_strictly_increasing_in_principal(self, scenario):
        values = [project(EQUITY, p, 24).value_for(scenario) for p in (1, 1_000, 1_001, 5_000_000)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_idempotent(self):
        first = project(EQUITY, 1_234_567, 37)
        second = project(EQUITY, 1_234_567, 37)
        assert first == second

    def test_annualized_independent_of_duration(self):
        short = project(EQUITY, 1_000_000, 1)
        long = project(EQUITY, 1_000_000, 600)
        assert short.moderate_annualized_rate_pct == long.moderate_annualized_rate_pct

    @pytest.mark.parametrize("months", [1, 600])
    @pytest.mark.parametrize("instrument", list(Instrument))
    def test_duration_boundaries_with_large_principal(self, months, instrument):
        result = project(base_rate(instrument), 10 ** 12, months)
        for scenario in Scenario:
            assert math.isfinite(result.value_for(scenario))


class TestProjectPreconditions:
    """No computation happens when a precondition fails."""

    def test_missing_rates(self):
        assert project(None, 1_000_000, 12) is None

    @pytest.mark.parametrize("principal", [0, -100, float("nan")])
    def test_non_positive_principal(self, principal):
        assert project(EQUITY, principal, 12) is None

    @pytest.mark.parametrize("months", [0, -1])
    def test_zero_duration(self, months):
        assert project(EQUITY, 1_000_000, months) is None

    def test_nan_rate_propagates(self):
        rates = RateTriple(optimistic=float("nan"), moderate=0.01, pessimistic=0.0)
        result = project(rates, 1_000_000, 12)
        assert math.isnan(result.optimistic_value)
        assert math.isfinite(result.moderate_value)


class TestDerivedHelpers:
    """Percent change and inflation comparison."""

    def test_future_value(self):
        assert future_value(100.0, 0.1, 2) == pytest.approx(121.0)

    def test_scenario_change_pct(self):
        result = project(EQUITY, 1_000_000, 12)
        changes = scenario_change_pct(result, 1_000_000)

        assert changes[Scenario.OPTIMISTIC] == pytest.approx(19.5618, abs=1e-3)
        assert changes[Scenario.PESSIMISTIC] < 0

    def test_scenario_change_pct_without_principal(self):
        result = project(EQUITY, 1_000_000, 12)
        assert set(scenario_change_pct(result, 0).values()) == {0.0}

    def test_beats_inflation(self):
        equity = project(EQUITY, 1_000_000, 12)
        deposit = project(base_rate(Instrument.TIME_DEPOSIT), 1_000_000, 12)

        assert beats_inflation(equity, 2.65)
        # (1.003^12 - 1) * 100 is about 3.66
        assert beats_inflation(deposit, 2.65)
        assert not beats_inflation(deposit, 4.0)

    def test_to_dataframe(self):
        result = project(EQUITY, 1_000_000, 12)
        df = result.to_dataframe(principal=1_000_000)

        assert list(df["Scenario"]) == ["Optimistic", "Moderate", "Pessimistic"]
        assert "Change (%)" in df.columns
        assert isinstance(result, ScenarioResult)
