"""
Reporting and Visualization Module

Formats simulation results for display and produces the downloadable
text summary. Nothing here recomputes engine output; every figure comes
straight from a SimulationResult.
"""

import logging
import math
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from .adjustments import TOGGLE_LABELS, WhatIfToggle
from .assumptions import DEFAULT_ASSUMPTIONS, MacroAssumptions
from .engine import SimulationResult
from .instruments import INSTRUMENT_INFO, Scenario, parse_instrument
from .profile import InvestorProfile

logger = logging.getLogger(__name__)


REPORT_TITLE = "RUPACAYA - Simulation Summary"

STRATEGY_NOTES = (
    "Profit: take 20-30%, let the rest keep growing; diversify.",
    "Loss: re-check fundamentals; keep averaging in if the long-term outlook is sound.",
    "Always keep an emergency fund; never borrow for consumption to invest.",
)


def format_currency(value: float) -> str:
    """Whole-unit Rupiah with dot thousands separators, e.g. 'Rp 1.195.618'."""
    if value is None or not math.isfinite(value):
        return "-"
    rounded = math.floor(value + 0.5)
    return "Rp " + f"{rounded:,}".replace(",", ".")


def format_pct(value: float, digits: int = 2) -> str:
    """Percentage with a fixed number of decimals, e.g. '5.76 %'."""
    if value is None or not math.isfinite(value):
        return "-"
    return f"{value:.{digits}f} %"


def format_signed_pct(value: float, digits: int = 2) -> str:
    if value is None or not math.isfinite(value):
        return "-"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{digits}f}%"


def format_count(value: float) -> str:
    """Integer count with dot thousands separators."""
    if value is None or not math.isfinite(value):
        return "-"
    return f"{int(value):,}".replace(",", ".")


def describe_duration(months: int) -> str:
    """'6 months' or '18 months (≈ 1 years 6 months)'."""
    m = int(months or 0)
    if m < 12:
        return f"{m} months"
    years, rest = divmod(m, 12)
    tail = f" {rest} months" if rest else ""
    return f"{m} months (≈ {years} years{tail})"


class SimulationReport:
    """
    Generate the text summary and charts for one simulation.
    """

    def __init__(self,
                 result: SimulationResult,
                 profile: Optional[InvestorProfile] = None,
                 assumptions: Optional[MacroAssumptions] = None):
        self.result = result
        self.profile = profile or InvestorProfile()
        self.assumptions = assumptions or DEFAULT_ASSUMPTIONS

    @property
    def instrument_title(self) -> str:
        instrument = parse_instrument(self.result.snapshot.instrument)
        return INSTRUMENT_INFO[instrument].title if instrument else "-"

    def generate_text_report(self) -> str:
        """Generate the flat, human-readable summary."""
        r = self.result
        snap = r.snapshot
        lines = []

        lines.append(REPORT_TITLE)
        lines.append("=" * 36)
        lines.append(f"Name        : {self.profile.name or '-'}")
        lines.append(f"Age         : {self.profile.age or '-'} years")
        lines.append(f"Occupation  : {self.profile.occupation or '-'}")
        lines.append(f"Age message : {self.profile.message or '-'}")
        lines.append("")

        lines.append(f"Instrument  : {self.instrument_title}")
        lines.append(f"Principal   : {format_currency(snap.principal)}")
        lines.append(f"Duration    : {describe_duration(snap.duration_months)}")
        lines.append("")

        lines.append("Three Scenarios:")
        lines.append(f"  Optimistic  : {format_currency(r.scenario.optimistic_value)}")
        lines.append(f"  Moderate    : {format_currency(r.scenario.moderate_value)}")
        lines.append(f"  Pessimistic : {format_currency(r.scenario.pessimistic_value)}")
        verdict = "beats inflation" if r.beats_inflation else "below inflation"
        lines.append(
            f"  Moderate avg/month: {format_pct(r.scenario.moderate_monthly_rate_pct)}"
            f" | Annualized: {format_pct(r.scenario.moderate_annualized_rate_pct)}"
            f" | Inflation: {format_pct(r.annual_inflation_pct)} ({verdict})"
        )
        lines.append("")

        lines.append("What-If:")
        states = [
            f"{TOGGLE_LABELS[t]}: {'ON' if snap.toggles.is_on(t) else 'OFF'}"
            for t in WhatIfToggle
        ]
        lines.append("  " + " | ".join(states))
        lines.append("")

        lines.append("National Impact (illustrative):")
        lines.append(f"  National investors: {format_count(snap.investor_count)} people")
        lines.append(f"  Total pooled funds: {format_currency(r.impact.total_pooled_funds)}")
        lines.append(f"  Estimated index push (indicative, daily): {format_pct(r.impact.impact_pct)}")
        lines.append("  Note: a liquidity illustration, not a literal index forecast.")
        if r.impact.is_illustrative_extreme:
            lines.append("  Note: inputs are extreme; the figure exceeds any plausible daily move.")
        lines.append("")

        lines.append("Inflation Simulation:")
        lines.append(f"  GDP (trillion): {snap.inflation.gdp_trillion:,.0f}")
        lines.append(f"  Productive share: {snap.inflation.productive_share * 100:.0f}%")
        lines.append(f"  Baseline inflation: {format_pct(r.inflation.baseline_inflation_pct)}")
        lines.append(f"  Additional inflation: {format_signed_pct(r.inflation.additional_inflation_pct, 5)}")
        lines.append(f"  Simulated inflation: {format_pct(r.inflation.simulated_inflation_pct)}")
        lines.append("")

        lines.append("Practical Strategy:")
        for note in STRATEGY_NOTES:
            lines.append(f"  - {note}")
        lines.append("")

        lines.append("Data sources (official references):")
        for source in self.assumptions.sources:
            lines.append(f"  • {source}")

        return "\n".join(lines)

    def plot_correlation_curve(self,
                               save_path: Optional[str] = None,
                               show: bool = True) -> plt.Figure:
        """
        Plot investor count against indicative impact.
        """
        points = self.result.curve
        fig, ax = plt.subplots(figsize=(8, 3))

        if not points:
            ax.text(0.5, 0.5, 'Chart appears once inputs are filled in',
                    ha='center', va='center', transform=ax.transAxes)
        else:
            xs = [p.investors for p in points]
            ys = [p.impact_pct for p in points]
            ax.plot(xs, ys, '-', linewidth=2.2, color='#2563eb')
            ax.plot(xs[-1], ys[-1], 'o', color='#2563eb')
            ax.set_ylim(bottom=0, top=max(max(ys), 1) * 1.05)

        ax.set_xlabel('National investors (10-100% of input)')
        ax.set_ylabel('Indicative push (%)')
        ax.set_title('Investor Count vs. Liquidity Impact')
        ax.xaxis.set_major_formatter(mticker.StrMethodFormatter('{x:,.0f}'))
        ax.grid(True, alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig

    def export_to_text(self, filepath: str):
        """Write the text summary to a file."""
        with open(filepath, "w", encoding="utf-8") as fh:
            fh.write(self.generate_text_report())
        logger.info(f"Summary exported to {filepath}")

    def export_to_csv(self, filepath: str):
        """Export the scenario table to CSV."""
        df = self.result.scenario.to_dataframe(principal=self.result.snapshot.principal)
        df.to_csv(filepath, index=False)
        logger.info(f"Results exported to {filepath}")


def scenario_labels() -> dict:
    """Display label and tagline per scenario."""
    return {
        Scenario.OPTIMISTIC: ("Optimistic", "Strong sentiment"),
        Scenario.MODERATE: ("Moderate", "Stable economy"),
        Scenario.PESSIMISTIC: ("Pessimistic", "Market pressure"),
    }
