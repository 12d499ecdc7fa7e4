"""
Methodology and glossary tab renderer.
"""

from __future__ import annotations

from typing import Any

from projection_model.adjustments import TOGGLE_DELTAS, TOGGLE_LABELS
from projection_model.instruments import BASE_RATES, INSTRUMENT_INFO

GLOSSARY = {
    "Policy rate": "Central bank benchmark rate; moves deposit and bond yields.",
    "Composite index": "Index of all shares listed on the exchange.",
    "Annualized": "Monthly rate compounded over twelve months.",
    "Inflation": "Yearly rise in the general price level.",
    "Liquidity": "How quickly an asset can be turned into cash without moving its price.",
    "DCA": "Dollar-cost averaging: buying a fixed amount at regular intervals.",
    "Productive share": "Fraction of investment funding real economic capacity.",
}


def render_methodology_tab(st_module: Any) -> None:
    """
    Render methodology/reference tab content.
    """
    st_module.header("ℹ️ Methodology")
    st_module.markdown(
        """
        ## How This Calculator Works
        - **Scenarios:** value = principal × (1 + monthly rate)^months, for the optimistic,
          moderate and pessimistic rate of the chosen instrument.
        - **What-if:** each switch shifts the monthly rates by a fixed amount per instrument;
          the pessimistic scenario moves half as much.
        - **National impact:** 8 × (principal × investors / daily turnover), uncapped and illustrative.
        - **Inflation:** k × (1 − productive share) × (pooled funds / GDP) × 100 on top of baseline inflation.
        """
    )

    st_module.subheader("Instruments")
    rows = []
    for instrument, info in INSTRUMENT_INFO.items():
        rates = BASE_RATES[instrument]
        rows.append({
            "Instrument": info.title,
            "Risk": info.risk.value,
            "Optimistic /mo": f"{rates.optimistic * 100:.2f}%",
            "Moderate /mo": f"{rates.moderate * 100:.2f}%",
            "Pessimistic /mo": f"{rates.pessimistic * 100:.2f}%",
        })
    st_module.table(rows)

    with st_module.expander("What-if deltas (monthly)", expanded=False):
        for toggle, deltas in TOGGLE_DELTAS.items():
            shifts = ", ".join(
                f"{INSTRUMENT_INFO[i].title} {d * 100:+.2f}%" for i, d in deltas.items()
            )
            st_module.markdown(f"- **{TOGGLE_LABELS[toggle]}**: {shifts}")

    with st_module.expander("📖 Glossary", expanded=False):
        for term, definition in GLOSSARY.items():
            st_module.markdown(f"**{term}**: {definition}")
