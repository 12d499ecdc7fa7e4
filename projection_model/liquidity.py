"""
National Liquidity Impact

Scales an individual principal by a national investor count and compares
the pooled amount with the exchange's daily turnover, giving an indicative
"liquidity push" percentage.

The figure is illustrative, not a forecast. It is deliberately uncapped:
extreme synthetic inputs can produce percentages far beyond anything a real
market would show, and those values are reported as-is.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from .assumptions import DEFAULT_ASSUMPTIONS


DEFAULT_ELASTICITY = DEFAULT_ASSUMPTIONS.liquidity_elasticity
CURVE_SAMPLES = 10


@dataclass(frozen=True)
class ImpactResult:
    """
    Aggregate participation and its indicative liquidity push.

    Attributes:
        total_pooled_funds: principal x investor count
        impact_pct: Indicative daily liquidity push (%), uncapped
        illustrative_threshold_pct: Level above which the figure is
            flagged as purely illustrative
    """
    total_pooled_funds: float
    impact_pct: float
    illustrative_threshold_pct: float = DEFAULT_ASSUMPTIONS.illustrative_threshold_pct

    @property
    def is_illustrative_extreme(self) -> bool:
        """True when the push exceeds any plausible daily move."""
        return self.impact_pct > self.illustrative_threshold_pct


@dataclass(frozen=True)
class CorrelationPoint:
    """One sample of the investor count vs. impact curve."""
    investors: float
    impact_pct: float


def _impact_pct(total_funds, daily_turnover_reference: float, elasticity: float):
    # Works for scalars and numpy arrays alike
    if daily_turnover_reference <= 0:
        return total_funds * 0.0
    return elasticity * (total_funds / daily_turnover_reference)


def estimate_impact(principal: float,
                    investor_count: float,
                    daily_turnover_reference: float = DEFAULT_ASSUMPTIONS.daily_turnover,
                    elasticity: float = DEFAULT_ELASTICITY,
                    illustrative_threshold_pct: float = DEFAULT_ASSUMPTIONS.illustrative_threshold_pct,
                    ) -> ImpactResult:
    """
    Estimate the liquidity push of everyone investing the same principal.

    Args:
        principal: Individual amount invested
        investor_count: Number of investors assumed to participate
        daily_turnover_reference: Average daily exchange turnover
        elasticity: Percent push per unit of turnover-relative capital

    Returns:
        ImpactResult (a non-positive turnover reference yields zero impact)
    """
    total = principal * investor_count
    return ImpactResult(
        total_pooled_funds=total,
        impact_pct=_impact_pct(total, daily_turnover_reference, elasticity),
        illustrative_threshold_pct=illustrative_threshold_pct,
    )


def correlation_curve(principal: float,
                      investor_count: float,
                      daily_turnover_reference: float = DEFAULT_ASSUMPTIONS.daily_turnover,
                      elasticity: float = DEFAULT_ELASTICITY,
                      samples: int = CURVE_SAMPLES) -> Tuple[CorrelationPoint, ...]:
    """
    Sample the impact at 1/samples .. 100% of the investor count.

    The impact axis is floored at zero for display; the headline figure from
    estimate_impact is not.

    Returns:
        Ordered points, or an empty tuple when principal or investor count
        is zero
    """
    if not principal or not investor_count:
        return ()

    fractions = np.arange(1, samples + 1) / samples
    investors = investor_count * fractions
    impacts = np.maximum(0.0, _impact_pct(investors * principal, daily_turnover_reference, elasticity))

    return tuple(
        CorrelationPoint(investors=float(x), impact_pct=float(y))
        for x, y in zip(investors, impacts)
    )


def correlation_frame(points: Tuple[CorrelationPoint, ...]) -> pd.DataFrame:
    """Curve points as a DataFrame for charting."""
    return pd.DataFrame({
        "Investors": [p.investors for p in points],
        "Impact (%)": [p.impact_pct for p in points],
    })
