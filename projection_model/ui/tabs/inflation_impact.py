"""
Inflation feedback tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from projection_model.reporting import format_currency, format_pct, format_signed_pct


def render_inflation_impact_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render baseline, additional and simulated inflation.
    """
    result = result_data["result"]
    inflation = result.inflation
    assumptions_in = result.snapshot.inflation

    st_module.header("💹 Investment Impact on Inflation")
    st_module.caption(
        f"GDP {assumptions_in.gdp_trillion:,.0f} trillion • "
        f"productive share {assumptions_in.productive_share * 100:.0f}% • "
        f"pooled funds {format_currency(result.impact.total_pooled_funds)}"
    )

    col1, col2, col3 = st_module.columns(3)
    with col1:
        st_module.metric("Baseline inflation", format_pct(inflation.baseline_inflation_pct))
    with col2:
        st_module.metric("Additional inflation", format_signed_pct(inflation.additional_inflation_pct, 5))
    with col3:
        st_module.metric("Simulated inflation", format_pct(inflation.simulated_inflation_pct))

    fig = go.Figure(
        go.Bar(
            x=["Baseline", "Simulated"],
            y=[inflation.baseline_inflation_pct, inflation.simulated_inflation_pct],
            marker_color=["#94a3b8", "#2563eb"],
        )
    )
    fig.update_layout(yaxis_title="Annual inflation (%)")
    st_module.plotly_chart(fig, use_container_width=True)

    st_module.info(
        """
        **Methodology Note:** additional inflation = k × (1 − productive share) × (pooled funds / GDP) × 100.
        Funds routed to productive capacity (factories, research, infrastructure) do not add to price pressure.
        """
    )
