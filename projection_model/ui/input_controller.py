"""
Sidebar input helpers for the profile and scenario forms.
"""

from __future__ import annotations

from typing import Any

from projection_model.adjustments import TOGGLE_LABELS, WhatIfToggle
from projection_model.assumptions import DEFAULT_ASSUMPTIONS
from projection_model.instruments import INSTRUMENT_INFO, Instrument
from projection_model.profile import age_message


def render_profile_inputs(st_module: Any) -> dict[str, Any]:
    """
    Render investor profile controls and return entered values.
    """
    st_module.subheader("👤 Investor Profile")
    name = st_module.text_input("Name", max_chars=30, help="2-30 characters")
    age = st_module.number_input("Age", min_value=0, max_value=100, value=0, step=1, help="Optional, 10-100")
    occupation = st_module.text_input("Occupation", help="Optional")

    message = age_message(int(age))
    if message:
        st_module.caption(message)

    return {"name": name, "age": int(age), "occupation": occupation}


def render_scenario_inputs(st_module: Any) -> dict[str, Any]:
    """
    Render instrument, amount, duration and macro assumption controls.
    """
    st_module.subheader("🧭 Instrument")
    instrument = st_module.selectbox(
        "Choose an instrument",
        options=list(Instrument),
        format_func=lambda i: f"{INSTRUMENT_INFO[i].title} (risk: {INSTRUMENT_INFO[i].risk.value})",
    )
    info = INSTRUMENT_INFO[instrument]
    st_module.caption(f"{info.definition} Tip: {info.tip}")

    st_module.subheader("🔢 Numbers")
    principal_text = st_module.text_input("Principal (Rp)", placeholder="e.g. 1.000.000")
    months_text = st_module.text_input("Duration (months)", placeholder="1-600")
    investors_text = st_module.text_input(
        "National investor count",
        value=str(DEFAULT_ASSUMPTIONS.default_investor_count),
        help="Number of capital-market investors (OJK/IDX statistics)",
    )

    st_module.subheader("🔀 What-If")
    toggles = {
        toggle.value: st_module.checkbox(TOGGLE_LABELS[toggle], value=False)
        for toggle in WhatIfToggle
    }

    with st_module.expander("💹 Inflation assumptions", expanded=False):
        gdp_trillion = st_module.number_input(
            "GDP (trillion Rp)",
            value=float(DEFAULT_ASSUMPTIONS.default_gdp_trillion),
            step=500.0,
            help="Latest nominal GDP from BPS",
        )
        productive_share = st_module.slider(
            "Productive share of funds",
            min_value=0.0,
            max_value=1.0,
            value=float(DEFAULT_ASSUMPTIONS.default_productive_share),
            step=0.05,
            help="Larger productive share (factories, research, infrastructure) keeps inflation in check",
        )

    return {
        "instrument": instrument,
        "principal_text": principal_text,
        "months_text": months_text,
        "investors_text": investors_text,
        "toggles": toggles,
        "gdp_trillion": gdp_trillion,
        "productive_share": productive_share,
    }
