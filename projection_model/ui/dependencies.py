"""
Dependency assembly for Streamlit app bootstrap.
"""

from __future__ import annotations

from types import SimpleNamespace

from projection_model import (
    DEFAULT_ASSUMPTIONS,
    ProjectionEngine,
    SimulationReport,
)

from .app_controller import run_main_app
from .helpers import build_profile, build_scenario_input, collect_input_errors
from .input_controller import render_profile_inputs, render_scenario_inputs
from .styles import apply_app_styles
from .tabs import (
    render_inflation_impact_tab,
    render_methodology_tab,
    render_national_impact_tab,
    render_results_summary_tab,
)


def build_app_dependencies() -> SimpleNamespace:
    """
    Build all runtime dependencies needed by the app controller.
    """
    return SimpleNamespace(
        DEFAULT_ASSUMPTIONS=DEFAULT_ASSUMPTIONS,
        ProjectionEngine=ProjectionEngine,
        SimulationReport=SimulationReport,
        build_profile=build_profile,
        build_scenario_input=build_scenario_input,
        collect_input_errors=collect_input_errors,
        render_profile_inputs=render_profile_inputs,
        render_scenario_inputs=render_scenario_inputs,
        render_results_summary_tab=render_results_summary_tab,
        render_national_impact_tab=render_national_impact_tab,
        render_inflation_impact_tab=render_inflation_impact_tab,
        render_methodology_tab=render_methodology_tab,
        apply_app_styles=apply_app_styles,
        run_main_app=run_main_app,
    )
