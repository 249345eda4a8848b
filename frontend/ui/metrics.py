"""KPI cards for the comparison page."""

from dataclasses import dataclass

import numpy as np
import streamlit as st

from utils.comparison import ComparisonSummary


@dataclass
class KPIResults:
    monthly_savings: float
    annual_savings: float
    avoided_emissions_t: float
    young_trees: int
    old_trees: int
    fuel_efficiency_km_l: float
    cost_ratio: float


def compute_kpis(summary: ComparisonSummary) -> KPIResults:
    """Pick headline figures and derive the EV-to-fuel per-km cost ratio."""
    cost_ratio = (
        summary.electrical_cost_km / summary.fuel_cost_km if summary.fuel_cost_km else float("nan")
    )
    return KPIResults(
        monthly_savings=summary.monthly_savings,
        annual_savings=summary.annual_savings,
        avoided_emissions_t=summary.avoided_emissions,
        young_trees=summary.young_trees,
        old_trees=summary.old_trees,
        fuel_efficiency_km_l=summary.fuel_efficiency,
        cost_ratio=cost_ratio,
    )


def _fmt_number(value: float, decimals: int = 2) -> str:
    if not np.isfinite(value):
        return "—"
    return f"{value:,.{decimals}f}"


def _fmt_percent(value: float, as_fraction: bool = False) -> str:
    if not np.isfinite(value):
        return "—"
    pct_value = value * 100.0 if as_fraction else value
    return f"{pct_value:,.2f}%"


def render_primary_metrics(kpis: KPIResults) -> None:
    """Render the savings and emissions cards shown after a comparison."""
    c1, c2, c3, c4 = st.columns(4)
    c1.metric(
        "Monthly savings",
        _fmt_number(kpis.monthly_savings, 0),
        help="Fuel cost minus electricity cost per km, times monthly distance.",
    )
    c2.metric(
        "Annual savings (IPC-compounded)",
        _fmt_number(kpis.annual_savings, 0),
        help="Twelve monthly savings compounded at the IPC-derived monthly rate.",
    )
    c3.metric(
        "Avoided CO2",
        f"{_fmt_number(kpis.avoided_emissions_t)} t/yr",
        help="Combustion-equivalent emissions over the annual distance.",
    )
    c4.metric(
        "EV cost vs fuel",
        _fmt_percent(kpis.cost_ratio, as_fraction=True),
        help=f"Equivalent fuel efficiency: {_fmt_number(kpis.fuel_efficiency_km_l)} km/L.",
    )

    t1, t2 = st.columns(2)
    t1.metric("Young trees equivalent", f"{kpis.young_trees:,}")
    t2.metric("Mature trees equivalent", f"{kpis.old_trees:,}")
