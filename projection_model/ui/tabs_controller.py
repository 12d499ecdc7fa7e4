"""
Tab wiring and render orchestration helpers.
"""

from __future__ import annotations

from typing import Any

TAB_LABELS = ["📊 Results", "🇮🇩 National Impact", "💹 Inflation", "ℹ️ Methodology"]


def build_main_tabs(st_module: Any) -> dict[str, Any]:
    """
    Create main result tabs layout and return named tab references.
    """
    tabs = st_module.tabs(TAB_LABELS)
    tab_map = dict(zip(TAB_LABELS, tabs))

    return {
        "tab_results": tab_map["📊 Results"],
        "tab_impact": tab_map["🇮🇩 National Impact"],
        "tab_inflation": tab_map["💹 Inflation"],
        "tab_methodology": tab_map["ℹ️ Methodology"],
    }


def render_result_tabs(st_module: Any, deps: Any, tabs: dict[str, Any]) -> None:
    """
    Render post-calculation tabs (results, impact, inflation, reference).
    """
    current_run_id = getattr(st_module.session_state, "current_run_id", None)
    results_run_id = getattr(st_module.session_state, "results_run_id", None)
    is_stale = bool(results_run_id and current_run_id and results_run_id != current_run_id)

    with tabs["tab_methodology"]:
        deps.render_methodology_tab(st_module=st_module)

    result_tabs = {
        "tab_results": deps.render_results_summary_tab,
        "tab_impact": deps.render_national_impact_tab,
        "tab_inflation": deps.render_inflation_impact_tab,
    }

    if not st_module.session_state.results:
        for key in result_tabs:
            with tabs[key]:
                st_module.info("👈 Fill in the sidebar and click 'Calculate' to see results.")
        return

    result_data = st_module.session_state.results
    for key, render_fn in result_tabs.items():
        with tabs[key]:
            if is_stale:
                st_module.warning("Inputs changed since the last run. Click **🚀 Calculate** to refresh results.")
            render_fn(st_module=st_module, result_data=result_data)


def render_footer(st_module: Any) -> None:
    """
    Render app footer.
    """
    st_module.markdown("---")
    st_module.caption(
        """
**RUPACAYA Investment Calculator** | Built with Streamlit |
Data: Bank Indonesia, OJK/IDX, BPS |
Educational illustration, not investment advice
"""
    )
