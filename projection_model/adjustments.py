"""
What-If Adjustments

Macro "what-if" switches that shift the baseline scenario rates of an
instrument. Each switch contributes a fixed monthly delta per instrument;
active deltas are summed and applied to every scenario, with the
pessimistic scenario receiving half of the shift.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .instruments import Instrument, RateTriple, base_rate, parse_instrument


PESSIMISTIC_DAMPING = 0.5


class WhatIfToggle(Enum):
    """Named macro shocks."""
    INFLATION_UP = "inflation_up"      # Inflation +1%
    RATE_CUT_DOWN = "rate_cut_down"    # Policy rate -0.25 pp
    INDEX_UP = "index_up"              # Composite index +5%


TOGGLE_LABELS: Dict[WhatIfToggle, str] = {
    WhatIfToggle.INFLATION_UP: "Inflation +1%",
    WhatIfToggle.RATE_CUT_DOWN: "Policy rate -0.25%",
    WhatIfToggle.INDEX_UP: "Composite index +5%",
}


# Monthly rate delta per (toggle, instrument); missing instruments get 0
TOGGLE_DELTAS: Dict[WhatIfToggle, Dict[Instrument, float]] = {
    WhatIfToggle.INFLATION_UP: {
        Instrument.EQUITY: -0.002,
        Instrument.BOND: -0.001,
        Instrument.TIME_DEPOSIT: 0.0005,
        Instrument.GOLD: 0.001,
        Instrument.FUND: -0.001,
    },
    WhatIfToggle.RATE_CUT_DOWN: {
        Instrument.EQUITY: 0.0015,
        Instrument.BOND: 0.001,
        Instrument.TIME_DEPOSIT: -0.0004,
        Instrument.GOLD: 0.0002,
        Instrument.FUND: 0.001,
    },
    WhatIfToggle.INDEX_UP: {
        Instrument.EQUITY: 0.002,
        Instrument.FUND: 0.0015,
        Instrument.GOLD: -0.0005,
    },
}


@dataclass(frozen=True)
class WhatIfToggles:
    """
    Independent on/off state of each what-if switch.

    Attributes:
        inflation_up: Inflation shock of +1%
        rate_cut_down: Policy rate cut of 0.25 pp
        index_up: Composite index rally of +5%
    """
    inflation_up: bool = False
    rate_cut_down: bool = False
    index_up: bool = False

    @property
    def active(self) -> Tuple[WhatIfToggle, ...]:
        """Active toggles in declaration order."""
        return tuple(t for t in WhatIfToggle if self.is_on(t))

    def is_on(self, toggle: WhatIfToggle) -> bool:
        return bool(getattr(self, toggle.value))

    @classmethod
    def from_active(cls, toggles) -> 'WhatIfToggles':
        """Build from an iterable of WhatIfToggle members."""
        return cls(**{t.value: True for t in toggles})


def total_delta(instrument: Instrument, toggles: WhatIfToggles) -> float:
    """Sum of the deltas contributed by every active toggle."""
    d = 0.0
    for toggle in toggles.active:
        d += TOGGLE_DELTAS[toggle].get(instrument, 0.0)
    return d


def adjusted_rate(instrument, toggles: WhatIfToggles) -> Optional[RateTriple]:
    """
    Baseline rates shifted by the active what-if toggles.

    Args:
        instrument: Instrument member (or its string value)
        toggles: Current what-if switch state

    Returns:
        Adjusted RateTriple, or None when the instrument is not recognized
        (no projection is available in that case)
    """
    parsed = parse_instrument(instrument)
    if parsed is None:
        return None

    b = base_rate(parsed)
    d = total_delta(parsed, toggles)
    return RateTriple(
        optimistic=b.optimistic + d,
        moderate=b.moderate + d,
        # Adverse scenario reacts to macro shocks with half the magnitude
        pessimistic=b.pessimistic + d * PESSIMISTIC_DAMPING,
    )
