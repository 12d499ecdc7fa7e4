"""
Results summary tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.express as px

from projection_model.instruments import Scenario
from projection_model.reporting import (
    describe_duration,
    format_currency,
    format_pct,
    format_signed_pct,
    scenario_labels,
)

from ..styles import SCENARIO_CARD_CLASSES


def render_results_summary_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render the three-scenario projection, growth rates and report download.
    """
    result = result_data["result"]
    profile = result_data["profile"]
    snapshot = result.snapshot
    scenario = result.scenario
    assumptions = result_data["assumptions"]

    st_module.header("📈 Projection Results")
    if profile.message:
        st_module.markdown(f"**{profile.name}**: {profile.message}")

    col1, col2, col3 = st_module.columns(3)
    with col1:
        st_module.metric("Principal", format_currency(snapshot.principal))
    with col2:
        st_module.metric("Duration", describe_duration(snapshot.duration_months))
    with col3:
        st_module.metric("Gold equivalent", f"{result.gold_grams:.2f} g")
        st_module.caption(f"≈ USD {result.usd_equivalent:,.2f}")

    st_module.markdown(
        """
        <div class="info-box">
        ℹ️ Figures below estimate your investment under three economic scenarios.
        Percentages show the gain or loss against your principal.
        </div>
        """,
        unsafe_allow_html=True,
    )

    labels = scenario_labels()
    changes = result.scenario_changes
    for column, s in zip(st_module.columns(3), Scenario):
        title, tagline = labels[s]
        change = changes[s]
        change_class = "positive-impact" if change >= 0 else "negative-impact"
        with column:
            st_module.markdown(
                f"""
                <div class="{SCENARIO_CARD_CLASSES[s.value]}">
                <h4>{title}</h4>
                <p><b>{format_currency(scenario.value_for(s))}</b></p>
                <span class="{change_class}">{format_signed_pct(change)}</span>
                <p>{tagline}</p>
                </div>
                """,
                unsafe_allow_html=True,
            )

    verdict = "→ beats inflation ✅" if result.beats_inflation else "→ below inflation ❌"
    st_module.markdown(
        f"Moderate avg/month: **{format_pct(scenario.moderate_monthly_rate_pct)}** • "
        f"Annualized: **{format_pct(scenario.moderate_annualized_rate_pct)}** • "
        f"Inflation: **{format_pct(assumptions.annual_inflation_pct)}** {verdict}"
    )

    df = scenario.to_dataframe(principal=snapshot.principal)
    fig = px.bar(
        df,
        x="Scenario",
        y="Future Value",
        color="Scenario",
        color_discrete_map={"Optimistic": "#16a34a", "Moderate": "#1d4ed8", "Pessimistic": "#dc2626"},
    )
    fig.add_hline(y=snapshot.principal, line_dash="dash", line_color="gray")
    st_module.plotly_chart(fig, use_container_width=True)

    st_module.download_button(
        "📥 Download summary (TXT)",
        data=result_data["report_text"],
        file_name="RUPACAYA_Summary.txt",
        mime="text/plain",
    )
