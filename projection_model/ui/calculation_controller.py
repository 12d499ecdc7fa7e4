"""
Calculation workflow helpers.
"""

from __future__ import annotations

from typing import Any

from .controller_utils import run_with_spinner_feedback


def render_sidebar_inputs(st_module: Any, deps: Any) -> dict[str, Any]:
    """
    Render profile and scenario controls in the sidebar and return interaction context.
    """
    profile_inputs = deps.render_profile_inputs(st_module)
    st_module.markdown("---")
    scenario_inputs = deps.render_scenario_inputs(st_module)

    st_module.markdown("---")

    # Calculate button is primary action
    calculate = st_module.button("🚀 Calculate", type="primary", use_container_width=True)

    return {
        "profile_inputs": profile_inputs,
        "scenario_inputs": scenario_inputs,
        "calculate": calculate,
    }


def ensure_results_state(st_module: Any) -> None:
    """
    Initialize results slot in session state when missing.
    """
    if "results" not in st_module.session_state:
        st_module.session_state.results = None


def calculate_simulation_result(
    deps: Any,
    profile_inputs: dict[str, Any],
    scenario_inputs: dict[str, Any],
    settings: dict[str, Any],
) -> dict[str, Any]:
    """
    Run the engine on validated form values and package everything the tabs render.
    """
    assumptions = deps.DEFAULT_ASSUMPTIONS.with_overrides(**settings)
    engine = deps.ProjectionEngine(assumptions)
    snapshot = deps.build_scenario_input(scenario_inputs)
    result = engine.run(snapshot)
    profile = deps.build_profile(profile_inputs)
    report = deps.SimulationReport(result, profile=profile, assumptions=assumptions)

    return {
        "result": result,
        "profile": profile,
        "assumptions": assumptions,
        "report_text": report.generate_text_report(),
    }


def execute_calculation_if_requested(
    st_module: Any,
    deps: Any,
    calc_context: dict[str, Any],
    settings: dict[str, Any],
) -> None:
    """
    Validate inputs, run the engine and write to session state.
    """
    if not calc_context["calculate"]:
        return

    errors = deps.collect_input_errors(calc_context["profile_inputs"], calc_context["scenario_inputs"])
    if errors:
        for message in errors:
            st_module.error(f"⚠️ {message}")
        st_module.session_state.results = None
        return

    def _run() -> None:
        st_module.session_state.results = calculate_simulation_result(
            deps=deps,
            profile_inputs=calc_context["profile_inputs"],
            scenario_inputs=calc_context["scenario_inputs"],
            settings=settings,
        )
        st_module.session_state.results_run_id = calc_context.get("run_id")

    run_with_spinner_feedback(
        st_module=st_module,
        spinner_message="Projecting scenarios...",
        success_message="✅ Calculation complete!",
        error_prefix="❌ Error calculating projection",
        action_fn=_run,
    )
