"""
Scenario Projection

Compounds adjusted monthly rates over a holding period to produce the
optimistic, moderate and pessimistic future values of a principal, and
derives the implied monthly and annualized moderate growth rates.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from .instruments import RateTriple, Scenario


@dataclass(frozen=True)
class ScenarioResult:
    """
    Future values under each scenario.

    Values are unrounded; rounding belongs to formatting.
    """
    optimistic_value: float
    moderate_value: float
    pessimistic_value: float
    moderate_monthly_rate_pct: float
    moderate_annualized_rate_pct: float

    def value_for(self, scenario: Scenario) -> float:
        return getattr(self, f"{scenario.value}_value")

    def to_dataframe(self, principal: Optional[float] = None) -> pd.DataFrame:
        """Scenario table, with percent change when a principal is given."""
        data = {
            "Scenario": [s.value.title() for s in Scenario],
            "Future Value": [self.value_for(s) for s in Scenario],
        }
        if principal is not None:
            changes = scenario_change_pct(self, principal)
            data["Change (%)"] = [changes[s] for s in Scenario]
        return pd.DataFrame(data)


def future_value(principal: float, rate: float, duration_months: int) -> float:
    """Monthly-compounded value of principal after duration_months."""
    return principal * (1 + rate) ** duration_months


def project(rates: Optional[RateTriple],
            principal: float,
            duration_months: int) -> Optional[ScenarioResult]:
    """
    Project a principal under each scenario rate.

    Args:
        rates: Adjusted monthly rates (None when no projection is available)
        principal: Amount invested, must be positive
        duration_months: Holding period, at least one month

    Returns:
        ScenarioResult, or None when a precondition does not hold
    """
    if rates is None or not principal > 0 or not duration_months >= 1:
        return None

    optimistic = future_value(principal, rates.optimistic, duration_months)
    moderate = future_value(principal, rates.moderate, duration_months)
    pessimistic = future_value(principal, rates.pessimistic, duration_months)

    # Monthly rate that reproduces the moderate outcome
    monthly_pct = ((moderate / principal) ** (1 / duration_months) - 1) * 100
    # From the adjusted rate itself, so independent of the holding period
    annualized_pct = ((1 + rates.moderate) ** 12 - 1) * 100

    return ScenarioResult(
        optimistic_value=optimistic,
        moderate_value=moderate,
        pessimistic_value=pessimistic,
        moderate_monthly_rate_pct=monthly_pct,
        moderate_annualized_rate_pct=annualized_pct,
    )


def scenario_change_pct(result: ScenarioResult, principal: float) -> Dict[Scenario, float]:
    """Percent gain or loss of each scenario against the principal."""
    if not principal > 0:
        return {s: 0.0 for s in Scenario}
    return {
        s: (result.value_for(s) - principal) / principal * 100
        for s in Scenario
    }


def beats_inflation(result: ScenarioResult, annual_inflation_pct: float) -> bool:
    """Whether the annualized moderate rate outpaces annual inflation."""
    return result.moderate_annualized_rate_pct > annual_inflation_pct
