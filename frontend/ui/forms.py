"""Streamlit form rendering for comparison inputs.

Keeping the form here lets ``app.run_app`` focus on orchestration.
"""

from dataclasses import dataclass, field
from typing import Dict, List, MutableMapping, Optional

import streamlit as st

from utils.dataset import EnvironmentDataset
from utils.environment import FUEL_PROFILES
from utils.ui_inputs import parse_distance_series

FUEL_PRICE_KEY = "fuel_price_input"
LAST_FORM_KEY = "last_comparison_form"


@dataclass
class ComparisonFormResult:
    fuel_type: str
    nominal_energy: float
    autonomy: float
    annual_ipc_pct: float
    fuel_price: Optional[float]
    energy_price: float
    annual_distance: float
    sweep_distances: List[float] = field(default_factory=list)
    run_submitted: bool = False
    validation_errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

    def comparison_kwargs(self) -> Dict[str, Optional[float]]:
        return {
            "nominal_energy": self.nominal_energy,
            "autonomy": self.autonomy,
            "annual_ipc_pct": self.annual_ipc_pct,
            "fuel_price": self.fuel_price,
            "energy_price": self.energy_price,
            "annual_distance": self.annual_distance,
        }


def fuel_price_override(use_reference: bool, custom_price: float) -> Optional[float]:
    """``None`` defers to the selected fuel's reference price at comparison time."""
    return None if use_reference else float(custom_price)


def select_active_form(
    form: ComparisonFormResult, state: MutableMapping[str, object]
) -> Optional[ComparisonFormResult]:
    """Return the inputs the page should show results for.

    A submitted, valid form replaces the stored one. Otherwise the last
    submitted inputs are reused so widget edits do not recompute until the
    user presses Compare again. ``None`` means nothing has been submitted.
    """
    if form.run_submitted and form.is_valid:
        state[LAST_FORM_KEY] = form
        return form
    stored = state.get(LAST_FORM_KEY)
    return stored if isinstance(stored, ComparisonFormResult) else None


def render_comparison_form(dataset: EnvironmentDataset) -> ComparisonFormResult:
    """Render sidebar inputs seeded from ``dataset`` and the fuel table."""
    st.session_state.setdefault(FUEL_PRICE_KEY, float(FUEL_PROFILES["diesel"].fuel_price))

    with st.sidebar:
        st.header("Vehicle & market")
        with st.form("comparison_form"):
            fuel_type = st.selectbox("Fuel type", options=list(FUEL_PROFILES), index=1)
            nominal_energy = st.number_input(
                "Nominal battery energy (kWh)", min_value=0.0, value=float(dataset.nominal_energy)
            )
            autonomy = st.number_input(
                "Advertised autonomy (km)",
                min_value=0.0,
                value=float(dataset.autonomy_nominal),
                help=f"Derated by {dataset.autonomy_factor:.0%} to a realistic range.",
            )
            annual_distance = st.number_input(
                "Annual distance (km)", min_value=0.0, value=float(dataset.annual_use), step=500.0
            )
            annual_ipc_pct = st.number_input(
                "Annual IPC (%)", value=float(dataset.annual_ipc_pct), step=0.1
            )
            use_reference_price = st.checkbox(
                "Use the selected fuel's reference price",
                value=True,
                key="use_reference_fuel_price",
                help=", ".join(
                    f"{name}: {profile.fuel_price:,.0f}" for name, profile in FUEL_PROFILES.items()
                ),
            )
            custom_fuel_price = st.number_input(
                "Custom fuel price (per L)",
                min_value=0.0,
                key=FUEL_PRICE_KEY,
                help="Used only when the reference price box is unchecked.",
            )
            energy_price = st.number_input(
                "Electricity price (per kWh)", min_value=0.0, value=float(dataset.energy_price)
            )
            sweep_text = st.text_area(
                "Distance sweep (km, comma or newline separated)",
                value="5000, 10000, 15000, 20000, 25000",
            )
            run_submitted = st.form_submit_button("Compare", type="primary")

    errors: List[str] = []
    if autonomy <= 0:
        errors.append("Autonomy must be greater than zero.")
    try:
        sweep_distances = parse_distance_series("Distance sweep", sweep_text)
    except ValueError as exc:
        errors.append(str(exc))
        sweep_distances = []

    return ComparisonFormResult(
        fuel_type=fuel_type,
        nominal_energy=nominal_energy,
        autonomy=autonomy,
        annual_ipc_pct=annual_ipc_pct,
        fuel_price=fuel_price_override(use_reference_price, custom_fuel_price),
        energy_price=energy_price,
        annual_distance=annual_distance,
        sweep_distances=sweep_distances,
        run_submitted=run_submitted,
        validation_errors=errors,
    )
