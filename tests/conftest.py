"""
Pytest fixtures for investment projection tests.
"""

import sys
from contextlib import nullcontext
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from projection_model import (
    Instrument,
    InflationSimInput,
    ProjectionEngine,
    ScenarioInput,
    WhatIfToggles,
)


# =============================================================================
# INPUT FIXTURES
# =============================================================================

@pytest.fixture
def equity_snapshot():
    """One million in equity for a year, no what-if switches."""
    return ScenarioInput(
        instrument=Instrument.EQUITY,
        principal=1_000_000,
        duration_months=12,
        investor_count=18_000_000,
        toggles=WhatIfToggles(),
        inflation=InflationSimInput(gdp_trillion=20_000, productive_share=0.7),
    )


@pytest.fixture
def valid_form_inputs():
    """Raw sidebar values as the Streamlit form returns them."""
    profile_inputs = {"name": "Sari", "age": 22, "occupation": "Student"}
    scenario_inputs = {
        "instrument": Instrument.EQUITY,
        "principal_text": "1.000.000",
        "months_text": "12",
        "investors_text": "18000000",
        "toggles": {"inflation_up": False, "rate_cut_down": False, "index_up": False},
        "gdp_trillion": 20_000.0,
        "productive_share": 0.7,
    }
    return profile_inputs, scenario_inputs


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine():
    """Engine with the default macro assumptions."""
    return ProjectionEngine()


# =============================================================================
# STREAMLIT FAKES
# =============================================================================

class FakeSessionState(dict):
    """Dict with attribute access, like st.session_state."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError as e:
            raise AttributeError(key) from e

    def __setattr__(self, key, value):
        self[key] = value


class FakeStreamlit:
    """Records calls; layout helpers return no-op context managers."""

    def __init__(self, returns=None):
        self.session_state = FakeSessionState()
        self.sidebar = nullcontext()
        self.calls = []
        # Widget name -> value handed back, e.g. {"text_input": ""}
        self.returns = dict(returns or {})

    def columns(self, spec, **kwargs):
        n = spec if isinstance(spec, int) else len(spec)
        return [nullcontext() for _ in range(n)]

    def tabs(self, labels):
        return [nullcontext() for _ in labels]

    def expander(self, *args, **kwargs):
        return nullcontext()

    def spinner(self, *args, **kwargs):
        return nullcontext()

    def messages(self, name):
        return [args[0] for call, args in self.calls if call == name]

    def __getattr__(self, name):
        def _record(*args, **kwargs):
            self.calls.append((name, args))
            return self.returns.get(name)
        return _record


@pytest.fixture
def fake_st():
    return FakeStreamlit()
