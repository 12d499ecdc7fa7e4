"""
Tests for the national liquidity impact and inflation feedback estimators.
"""

import math

import pytest

from projection_model.inflation import estimate_inflation
from projection_model.liquidity import (
    ImpactResult,
    correlation_curve,
    correlation_frame,
    estimate_impact,
)


TURNOVER = 25_020_000_000_000


class TestEstimateImpact:
    """Test the headline liquidity push."""

    def test_national_example(self):
        impact = estimate_impact(1_000_000, 18_000_000, TURNOVER)

        assert impact.total_pooled_funds == 1.8e13
        assert impact.impact_pct == pytest.approx(5.7554, abs=1e-4)
        assert not impact.is_illustrative_extreme

    def test_uncapped_for_extreme_inputs(self):
        # Illustrative only: far above any plausible daily move, and kept that way
        impact = estimate_impact(1_000_000_000, 18_000_000, TURNOVER)

        assert impact.impact_pct > 1_000
        assert impact.is_illustrative_extreme

    def test_custom_elasticity(self):
        impact = estimate_impact(1_000, 1_000, 1_000_000, elasticity=4)
        assert impact.impact_pct == pytest.approx(4.0)

    def test_non_positive_turnover_gives_zero(self):
        assert estimate_impact(1_000_000, 10, 0).impact_pct == 0.0
        assert estimate_impact(1_000_000, 10, -5).impact_pct == 0.0

    def test_idempotent(self):
        assert estimate_impact(777, 12_345, TURNOVER) == estimate_impact(777, 12_345, TURNOVER)

    def test_nan_propagates(self):
        assert math.isnan(estimate_impact(float("nan"), 10, TURNOVER).impact_pct)

    def test_nan_turnover_propagates(self):
        assert math.isnan(estimate_impact(1_000_000, 10, float("nan")).impact_pct)

    def test_threshold_flag(self):
        assert ImpactResult(total_pooled_funds=0, impact_pct=25.0).is_illustrative_extreme
        assert not ImpactResult(total_pooled_funds=0, impact_pct=20.0).is_illustrative_extreme


class TestCorrelationCurve:
    """Test the investor-count vs. impact curve."""

    def test_ten_points(self):
        points = correlation_curve(1_000_000, 18_000_000, TURNOVER)

        assert len(points) == 10
        assert points[0].investors == pytest.approx(1_800_000)
        assert points[-1].investors == 18_000_000

    def test_last_point_matches_headline(self):
        points = correlation_curve(1_000_000, 18_000_000, TURNOVER)
        impact = estimate_impact(1_000_000, 18_000_000, TURNOVER)
        assert points[-1].impact_pct == pytest.approx(impact.impact_pct)

    def test_non_decreasing(self):
        points = correlation_curve(2_500_000, 9_000_000, TURNOVER)

        xs = [p.investors for p in points]
        ys = [p.impact_pct for p in points]
        assert xs == sorted(xs)
        assert all(a <= b for a, b in zip(ys, ys[1:]))

    def test_linear_in_investors(self):
        points = correlation_curve(1_000_000, 18_000_000, TURNOVER)
        assert points[4].impact_pct == pytest.approx(points[-1].impact_pct / 2)

    @pytest.mark.parametrize("principal,investors", [(0, 18_000_000), (1_000_000, 0), (None, 10)])
    def test_empty_without_inputs(self, principal, investors):
        assert correlation_curve(principal, investors, TURNOVER) == ()

    def test_negative_impact_floored_for_display(self):
        points = correlation_curve(-1_000_000, 18_000_000, TURNOVER)

        assert all(p.impact_pct == 0.0 for p in points)
        # Headline figure is not floored
        assert estimate_impact(-1_000_000, 18_000_000, TURNOVER).impact_pct < 0

    def test_restartable(self):
        assert correlation_curve(5, 100, TURNOVER) == correlation_curve(5, 100, TURNOVER)

    def test_frame(self):
        df = correlation_frame(correlation_curve(1_000_000, 18_000_000, TURNOVER))
        assert list(df.columns) == ["Investors", "Impact (%)"]
        assert len(df) == 10


class TestEstimateInflation:
    """Test the inflation feedback estimator."""

    def test_national_example(self):
        result = estimate_inflation(1_000_000, 18_000_000, 20_000, 0.7, 2.65, 0.05)

        assert result.total_funds_trillion == pytest.approx(18.0)
        assert result.ratio_to_gdp == pytest.approx(0.0009)
        assert result.additional_inflation_pct == pytest.approx(0.00135)
        assert result.simulated_inflation_pct == pytest.approx(2.65135)
        assert result.baseline_inflation_pct == 2.65

    def test_productive_share_dampens(self):
        additional = [
            estimate_inflation(1_000_000, 18_000_000, 20_000, share, 2.65, 0.05).additional_inflation_pct
            for share in (0.0, 0.25, 0.5, 0.75, 1.0)
        ]
        assert all(a > b for a, b in zip(additional, additional[1:]))
        assert additional[-1] == 0.0

    def test_zero_ratio_stays_zero(self):
        for share in (0.0, 0.5, 1.0):
            result = estimate_inflation(0, 18_000_000, 20_000, share, 2.65, 0.05)
            assert result.additional_inflation_pct == 0.0

    def test_increases_with_ratio_to_gdp(self):
        small = estimate_inflation(1_000_000, 18_000_000, 40_000, 0.7, 2.65, 0.05)
        large = estimate_inflation(1_000_000, 18_000_000, 10_000, 0.7, 2.65, 0.05)
        assert large.additional_inflation_pct > small.additional_inflation_pct

    @pytest.mark.parametrize("gdp", [0, -100])
    def test_non_positive_gdp_gives_zero_ratio(self, gdp):
        result = estimate_inflation(1_000_000, 18_000_000, gdp, 0.7, 2.65, 0.05)

        assert result.ratio_to_gdp == 0.0
        assert result.simulated_inflation_pct == 2.65

    def test_out_of_range_share_inverts_sign(self):
        # Not rejected by the estimator; InputValidator guards this upstream
        result = estimate_inflation(1_000_000, 18_000_000, 20_000, 1.5, 2.65, 0.05)
        assert result.additional_inflation_pct < 0
        assert result.simulated_inflation_pct < 2.65

    def test_idempotent(self):
        args = (3_000_000, 1_000_000, 21_000, 0.4, 2.65, 0.05)
        assert estimate_inflation(*args) == estimate_inflation(*args)
