"""
Investment Projection & National Impact Model

An educational calculator projecting an investment under three scenarios
and illustrating the macro effect of national participation on market
liquidity and inflation.
"""

from .assumptions import MacroAssumptions, DEFAULT_ASSUMPTIONS
from .instruments import (
    Instrument,
    RiskTier,
    Scenario,
    RateTriple,
    INSTRUMENT_INFO,
    base_rate,
)
from .adjustments import WhatIfToggle, WhatIfToggles, adjusted_rate
from .projection import ScenarioResult, project, scenario_change_pct, beats_inflation
from .liquidity import ImpactResult, CorrelationPoint, estimate_impact, correlation_curve
from .inflation import InflationSimInput, InflationSimResult, estimate_inflation
from .validation import InputValidator, InvalidInputError, ValidationResult
from .profile import InvestorProfile, age_message
from .engine import ProjectionEngine, ScenarioInput, SimulationResult
from .reporting import SimulationReport

__version__ = "1.0.0"
__all__ = [
    "MacroAssumptions",
    "DEFAULT_ASSUMPTIONS",
    "Instrument",
    "RiskTier",
    "Scenario",
    "RateTriple",
    "INSTRUMENT_INFO",
    "base_rate",
    "WhatIfToggle",
    "WhatIfToggles",
    "adjusted_rate",
    "ScenarioResult",
    "project",
    "scenario_change_pct",
    "beats_inflation",
    "ImpactResult",
    "CorrelationPoint",
    "estimate_impact",
    "correlation_curve",
    "InflationSimInput",
    "InflationSimResult",
    "estimate_inflation",
    "InputValidator",
    "InvalidInputError",
    "ValidationResult",
    "InvestorProfile",
    "age_message",
    "ProjectionEngine",
    "ScenarioInput",
    "SimulationResult",
    "SimulationReport",
]
