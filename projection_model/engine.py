"""
Projection Engine

Runs the full calculation for one input snapshot: scenario projection,
national liquidity impact and inflation feedback. Every run recomputes all
outputs from the snapshot; nothing is cached between runs.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .adjustments import WhatIfToggles, adjusted_rate
from .assumptions import DEFAULT_ASSUMPTIONS, MacroAssumptions
from .inflation import InflationSimInput, InflationSimResult, estimate_inflation
from .instruments import Instrument, RateTriple, Scenario, parse_instrument
from .liquidity import CorrelationPoint, ImpactResult, correlation_curve, estimate_impact
from .projection import ScenarioResult, beats_inflation, project, scenario_change_pct
from .validation import InputValidator, InvalidInputError, ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioInput:
    """
    Immutable snapshot of everything a calculation depends on.

    Attributes:
        instrument: Instrument to project
        principal: Amount invested (currency units)
        duration_months: Holding period, 1 to 600 months
        investor_count: Assumed national investor count
        toggles: What-if switch state
        inflation: GDP and productive-share assumptions
    """
    instrument: Instrument
    principal: float
    duration_months: int
    investor_count: int = DEFAULT_ASSUMPTIONS.default_investor_count
    toggles: WhatIfToggles = field(default_factory=WhatIfToggles)
    inflation: InflationSimInput = field(default_factory=InflationSimInput)


@dataclass(frozen=True)
class SimulationResult:
    """All derived outputs for one ScenarioInput."""
    snapshot: ScenarioInput
    rates: RateTriple
    scenario: ScenarioResult
    impact: ImpactResult
    curve: Tuple[CorrelationPoint, ...]
    inflation: InflationSimResult
    annual_inflation_pct: float
    gold_grams: float
    usd_equivalent: float

    @property
    def beats_inflation(self) -> bool:
        return beats_inflation(self.scenario, self.annual_inflation_pct)

    @property
    def scenario_changes(self) -> Dict[Scenario, float]:
        return scenario_change_pct(self.scenario, self.snapshot.principal)

    @property
    def is_finite(self) -> bool:
        values = (
            self.scenario.optimistic_value,
            self.scenario.moderate_value,
            self.scenario.pessimistic_value,
            self.impact.impact_pct,
            self.inflation.simulated_inflation_pct,
        )
        return all(math.isfinite(v) for v in values)


class ProjectionEngine:
    """
    Facade over the rate model and the three estimators.

    Example:
        >>> engine = ProjectionEngine()
        >>> result = engine.run(ScenarioInput(Instrument.EQUITY, 1_000_000, 12))
        >>> round(result.scenario.moderate_value)
        1100339
    """

    def __init__(self, assumptions: Optional[MacroAssumptions] = None):
        self.assumptions = assumptions or DEFAULT_ASSUMPTIONS

    def validate(self, snapshot: ScenarioInput) -> List[ValidationResult]:
        """Run every input check that gates the engine."""
        return [
            InputValidator.validate_instrument(snapshot.instrument),
            InputValidator.validate_scenario_numbers(
                snapshot.principal, snapshot.duration_months, snapshot.investor_count
            ),
            InputValidator.validate_inflation_inputs(
                snapshot.inflation.gdp_trillion, snapshot.inflation.productive_share
            ),
        ]

    def run(self, snapshot: ScenarioInput) -> SimulationResult:
        """
        Compute every output for a snapshot.

        Raises:
            InvalidInputError: if the snapshot violates the input ranges
        """
        checks = self.validate(snapshot)
        if not all(c.passed for c in checks):
            raise InvalidInputError(checks)

        a = self.assumptions
        instrument = parse_instrument(snapshot.instrument)
        logger.debug(
            f"Projecting {instrument.value}: principal={snapshot.principal}, "
            f"months={snapshot.duration_months}, toggles={[t.value for t in snapshot.toggles.active]}"
        )

        rates = adjusted_rate(instrument, snapshot.toggles)
        scenario = project(rates, snapshot.principal, snapshot.duration_months)

        impact = estimate_impact(
            snapshot.principal,
            snapshot.investor_count,
            daily_turnover_reference=a.daily_turnover,
            elasticity=a.liquidity_elasticity,
            illustrative_threshold_pct=a.illustrative_threshold_pct,
        )
        curve = correlation_curve(
            snapshot.principal,
            snapshot.investor_count,
            daily_turnover_reference=a.daily_turnover,
            elasticity=a.liquidity_elasticity,
        )
        inflation = estimate_inflation(
            snapshot.principal,
            snapshot.investor_count,
            gdp_trillion=snapshot.inflation.gdp_trillion,
            productive_share=snapshot.inflation.productive_share,
            baseline_inflation_pct=a.baseline_inflation_pct,
            sensitivity_k=a.inflation_sensitivity,
        )

        result = SimulationResult(
            snapshot=snapshot,
            rates=rates,
            scenario=scenario,
            impact=impact,
            curve=curve,
            inflation=inflation,
            annual_inflation_pct=a.annual_inflation_pct,
            gold_grams=snapshot.principal / a.gold_price_per_gram,
            usd_equivalent=snapshot.principal / a.usd_price,
        )

        if not result.is_finite:
            logger.warning(f"Non-finite projection output for {instrument.value}")
        if impact.is_illustrative_extreme:
            logger.info(
                f"Liquidity impact {impact.impact_pct:.2f}% exceeds "
                f"{a.illustrative_threshold_pct:.0f}%; illustrative only"
            )

        return result
