"""
National liquidity impact tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.express as px

from projection_model.liquidity import correlation_frame
from projection_model.reporting import format_count, format_currency, format_pct


def render_national_impact_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render pooled funds, indicative index push and the investor-count curve.
    """
    result = result_data["result"]
    impact = result.impact
    snapshot = result.snapshot

    st_module.header("🇮🇩 National Impact")
    st_module.markdown(
        f"If **{format_count(snapshot.investor_count)}** people each invested "
        f"**{format_currency(snapshot.principal)}**, the pooled funds would total "
        f"**{format_currency(impact.total_pooled_funds)}**."
    )

    col1, col2 = st_module.columns(2)
    with col1:
        st_module.metric("Total pooled funds", format_currency(impact.total_pooled_funds))
    with col2:
        st_module.metric(
            "Indicative index push (daily)",
            format_pct(impact.impact_pct),
            help="Liquidity illustration, not a literal index forecast.",
        )

    if impact.is_illustrative_extreme:
        st_module.warning(
            "These inputs are extreme: the figure is far beyond any plausible daily move "
            "and is shown only to illustrate scale."
        )

    st_module.subheader("Investor count vs. indicative push")
    st_module.caption("X: national investors (10-100% of input) • Y: indicative push (%)")
    if not result.curve:
        st_module.info("(The chart appears once inputs are filled in)")
        return

    fig = px.line(
        correlation_frame(result.curve),
        x="Investors",
        y="Impact (%)",
        markers=True,
    )
    fig.update_yaxes(rangemode="tozero")
    st_module.plotly_chart(fig, use_container_width=True)
