"""
Inflation Feedback

Maps aggregate investment relative to GDP onto a marginal inflation
adjustment. The productive share of funds (factories, research,
infrastructure) dampens the inflationary pressure; only the passive
remainder feeds into prices.
"""

from dataclasses import dataclass

from .assumptions import DEFAULT_ASSUMPTIONS


TRILLION = 1_000_000_000_000


@dataclass(frozen=True)
class InflationSimInput:
    """
    Inflation simulation assumptions.

    Attributes:
        gdp_trillion: Nominal GDP in trillions of currency units
        productive_share: Fraction of aggregate funds put to productive use,
            expected in [0, 1]
    """
    gdp_trillion: float = DEFAULT_ASSUMPTIONS.default_gdp_trillion
    productive_share: float = DEFAULT_ASSUMPTIONS.default_productive_share


@dataclass(frozen=True)
class InflationSimResult:
    """Baseline, marginal and simulated annual inflation (%)."""
    baseline_inflation_pct: float
    additional_inflation_pct: float
    simulated_inflation_pct: float
    total_funds_trillion: float = 0.0
    ratio_to_gdp: float = 0.0


def estimate_inflation(principal: float,
                       investor_count: float,
                       gdp_trillion: float,
                       productive_share: float,
                       baseline_inflation_pct: float = DEFAULT_ASSUMPTIONS.baseline_inflation_pct,
                       sensitivity_k: float = DEFAULT_ASSUMPTIONS.inflation_sensitivity,
                       ) -> InflationSimResult:
    """
    Estimate the inflation effect of aggregate investment.

    additional = k * (1 - productive_share) * (funds / GDP) * 100

    A productive share outside [0, 1] is computed as given, which inverts
    the sign of the passive term; range checks live in InputValidator.

    Args:
        principal: Individual amount invested
        investor_count: Number of participating investors
        gdp_trillion: Nominal GDP (trillions); non-positive GDP gives a
            zero ratio
        productive_share: Fraction of funds routed to productive use
        baseline_inflation_pct: Starting annual inflation (%)
        sensitivity_k: Sensitivity coefficient

    Returns:
        InflationSimResult
    """
    total_trillion = (principal * investor_count) / TRILLION
    ratio = total_trillion / gdp_trillion if gdp_trillion > 0 else 0.0

    additional = sensitivity_k * (1 - productive_share) * ratio * 100

    return InflationSimResult(
        baseline_inflation_pct=baseline_inflation_pct,
        additional_inflation_pct=additional,
        simulated_inflation_pct=baseline_inflation_pct + additional,
        total_funds_trillion=total_trillion,
        ratio_to_gdp=ratio,
    )
