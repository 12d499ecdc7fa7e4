"""
Instrument Rate Model

Defines the investable instruments and their baseline monthly growth
rates under the optimistic, moderate and pessimistic scenarios.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Instrument(Enum):
    """Instruments a user can project."""
    EQUITY = "equity"
    BOND = "bond"
    TIME_DEPOSIT = "time-deposit"
    GOLD = "gold"
    FUND = "fund"


class RiskTier(Enum):
    """Informational risk classification."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Scenario(Enum):
    """Projection scenarios."""
    OPTIMISTIC = "optimistic"
    MODERATE = "moderate"
    PESSIMISTIC = "pessimistic"


@dataclass(frozen=True)
class RateTriple:
    """Monthly fractional growth rates, one per scenario."""
    optimistic: float
    moderate: float
    pessimistic: float

    def for_scenario(self, scenario: Scenario) -> float:
        return getattr(self, scenario.value)


@dataclass(frozen=True)
class InstrumentInfo:
    """Display metadata for an instrument."""
    title: str
    risk: RiskTier
    definition: str
    drivers: Tuple[str, ...]
    tip: str


# Monthly rates (educational, realistic order of magnitude)
BASE_RATES: Dict[Instrument, RateTriple] = {
    Instrument.EQUITY: RateTriple(optimistic=0.015, moderate=0.008, pessimistic=-0.01),
    Instrument.BOND: RateTriple(optimistic=0.007, moderate=0.004, pessimistic=-0.003),
    Instrument.TIME_DEPOSIT: RateTriple(optimistic=0.004, moderate=0.003, pessimistic=0.002),
    Instrument.GOLD: RateTriple(optimistic=0.006, moderate=0.004, pessimistic=0.0002),
    Instrument.FUND: RateTriple(optimistic=0.012, moderate=0.006, pessimistic=-0.007),
}


INSTRUMENT_INFO: Dict[Instrument, InstrumentInfo] = {
    Instrument.EQUITY: InstrumentInfo(
        title="Equity",
        risk=RiskTier.HIGH,
        definition="Ownership in a company. Returns come from price gains and dividends.",
        drivers=(
            "Policy rate cut -> lower discount rate -> higher valuations",
            "Stable inflation keeps purchasing power and earnings intact",
            "Global sentiment and foreign fund flows",
        ),
        tip="Start with index or blue-chip names; avoid FOMO; use dollar-cost averaging.",
    ),
    Instrument.BOND: InstrumentInfo(
        title="Bond",
        risk=RiskTier.MEDIUM,
        definition="Government or corporate debt paying periodic coupons until maturity.",
        drivers=(
            "Policy rate cut -> coupons relatively attractive -> prices rise",
            "High inflation -> rates rise -> prices fall",
        ),
        tip="Retail government bonds suit beginners; understand tenor and coupon.",
    ),
    Instrument.TIME_DEPOSIT: InstrumentInfo(
        title="Time Deposit",
        risk=RiskTier.LOW,
        definition="Fixed-rate term savings, insured by the deposit guarantee agency up to a limit.",
        drivers=(
            "Policy rate hike -> deposit rates rise",
            "High inflation can erode the real return",
        ),
        tip="Compare rates between banks; mind early-withdrawal penalties.",
    ),
    Instrument.GOLD: InstrumentInfo(
        title="Gold",
        risk=RiskTier.MEDIUM,
        definition="Safe-haven store of value priced off world gold and the exchange rate.",
        drivers=(
            "Rising inflation and uncertainty -> gold more attractive",
            "Stronger rupiah can lower the rupiah gold price",
        ),
        tip="Keep it to 10-20% of a portfolio; buy periodically; store certified bars.",
    ),
    Instrument.FUND: InstrumentInfo(
        title="Mutual Fund",
        risk=RiskTier.HIGH,
        definition="Professionally managed pool of equities, bonds or money-market assets.",
        drivers=(
            "Driven by the underlying assets and fees",
            "Market conditions and manager performance",
        ),
        tip="Prefer low-cost index funds for the long run.",
    ),
}


def base_rate(instrument: Instrument) -> RateTriple:
    """Baseline monthly rate triple for an instrument."""
    return BASE_RATES[instrument]


def parse_instrument(value) -> Optional[Instrument]:
    """
    Coerce an enum member or its string value into an Instrument.

    Returns None when the value names no known instrument.
    """
    if isinstance(value, Instrument):
        return value
    try:
        return Instrument(value)
    except ValueError:
        return None
