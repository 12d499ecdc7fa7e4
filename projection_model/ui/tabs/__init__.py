"""
Tab renderer modules for Streamlit app.
"""

from .inflation_impact import render_inflation_impact_tab
from .methodology import render_methodology_tab
from .national_impact import render_national_impact_tab
from .results_summary import render_results_summary_tab

__all__ = [
    "render_inflation_impact_tab",
    "render_methodology_tab",
    "render_national_impact_tab",
    "render_results_summary_tab",
]
