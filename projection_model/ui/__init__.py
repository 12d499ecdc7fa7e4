"""
UI helper utilities for Streamlit app composition.
"""

from .styles import APP_STYLES, apply_app_styles
from .helpers import build_profile, build_scenario_input, collect_input_errors, parse_scenario_numbers
from .input_controller import render_profile_inputs, render_scenario_inputs
from .calculation_controller import calculate_simulation_result
from .app_controller import run_main_app
from .dependencies import build_app_dependencies

__all__ = [
    "APP_STYLES",
    "apply_app_styles",
    "build_profile",
    "build_scenario_input",
    "collect_input_errors",
    "parse_scenario_numbers",
    "render_profile_inputs",
    "render_scenario_inputs",
    "calculate_simulation_result",
    "run_main_app",
    "build_app_dependencies",
]
