"""
Settings panel rendering helpers.
"""

from __future__ import annotations

from typing import Any

from projection_model.assumptions import DEFAULT_ASSUMPTIONS


def render_settings_tab(st_module: Any, settings_tab: Any) -> dict[str, Any]:
    """
    Render calibration controls and return the chosen assumption overrides.
    """
    a = DEFAULT_ASSUMPTIONS

    with settings_tab:
        st_module.subheader("Calibration")
        annual_inflation_pct = st_module.number_input(
            "Baseline annual inflation (%)",
            value=float(a.annual_inflation_pct),
            step=0.05,
            help="BPS annual inflation; also the bar the moderate scenario is compared against",
        )
        daily_turnover = st_module.number_input(
            "Daily exchange turnover (Rp)",
            value=float(a.daily_turnover),
            step=1_000_000_000_000.0,
            format="%.0f",
        )
        liquidity_elasticity = st_module.number_input(
            "Liquidity elasticity",
            value=float(a.liquidity_elasticity),
            step=0.5,
            help="Percent push per unit of pooled funds relative to daily turnover",
        )
        inflation_sensitivity = st_module.number_input(
            "Inflation sensitivity k",
            value=float(a.inflation_sensitivity),
            step=0.01,
            format="%.3f",
        )
        st_module.caption("Educational calibration, not an estimate.")

        if st_module.button("🗑️ Reset All", type="primary", help="Clear all inputs, results, and settings to default"):
            st_module.session_state.clear()
            st_module.rerun()

    return {
        "annual_inflation_pct": annual_inflation_pct,
        "daily_turnover": daily_turnover,
        "liquidity_elasticity": liquidity_elasticity,
        "inflation_sensitivity": inflation_sensitivity,
    }
