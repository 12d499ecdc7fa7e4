"""
Macro Assumptions

Process-wide constants used by the projection and impact estimators.
Values are an educational snapshot of the Indonesian market (September 2025)
and are fixed once the engine is constructed.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class MacroAssumptions:
    """
    Macro snapshot and calibration constants.

    Attributes:
        composite_index: Composite stock index level (points)
        usd_price: Rupiah per US dollar
        annual_inflation_pct: Baseline annual inflation (%)
        policy_rate_pct: Central bank policy rate (%)
        gold_price_per_gram: Rupiah per gram of gold bullion
        daily_turnover: Average daily exchange turnover (Rupiah)
        liquidity_elasticity: Percent liquidity push per unit of
            turnover-relative pooled capital
        inflation_sensitivity: Sensitivity k of inflation to aggregate
            investment relative to GDP
        default_investor_count: National investor count (single investor IDs)
        default_gdp_trillion: Nominal GDP (trillion Rupiah)
        default_productive_share: Share of aggregate funds routed to
            productive use
        illustrative_threshold_pct: Liquidity impact above which results are
            flagged as illustrative only
    """
    composite_index: float = 8080.75
    usd_price: float = 16_656.0
    annual_inflation_pct: float = 2.65
    policy_rate_pct: float = 4.75
    gold_price_per_gram: float = 2_142_000.0
    daily_turnover: float = 25_020_000_000_000.0

    # Calibration (educational, not estimated)
    liquidity_elasticity: float = 8.0
    inflation_sensitivity: float = 0.05

    default_investor_count: int = 18_000_000
    default_gdp_trillion: float = 20_000.0
    default_productive_share: float = 0.7

    illustrative_threshold_pct: float = 20.0

    sources: Tuple[str, ...] = field(default_factory=lambda: (
        "Bank Indonesia (policy rate, inflation) - bi.go.id",
        "OJK / IDX (composite index, investor statistics) - ojk.go.id / idx.co.id",
        "BPS (macro indicators) - bps.go.id",
    ))

    @property
    def baseline_inflation_pct(self) -> float:
        """Inflation the feedback estimator starts from."""
        return self.annual_inflation_pct

    def with_overrides(self, **changes) -> 'MacroAssumptions':
        """Return a copy with selected constants replaced."""
        return replace(self, **changes)


DEFAULT_ASSUMPTIONS = MacroAssumptions()
