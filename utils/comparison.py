"""End-to-end EV vs. combustion comparison built on the core formulas.

``compare_vehicles`` chains the calculator the same way the app and API
need it: fuel lookup, consumption, per-km cost and emissions, then savings
and tree equivalents. Inputs left as ``None`` fall back to the dataset (or
to the fuel profile for ``fuel_price``).
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

import pandas as pd

from utils.dataset import EnvironmentDataset
from utils.environment import (
    EnvironmentCalculator,
    LookupFailure,
    fuel_energy_selector,
    ti_month,
)

logger = logging.getLogger(__name__)

# Units shown alongside each summary field in tables and API responses.
SUMMARY_UNITS: Dict[str, str] = {
    "fuel_type": "",
    "nominal_energy": "kWh",
    "autonomy": "km",
    "annual_distance": "km/year",
    "annual_ipc_pct": "%",
    "monthly_rate": "fraction/month",
    "fuel_price": "currency/L",
    "energy_price": "currency/kWh",
    "fuel_energy": "MJ/L",
    "emission_factor": "g CO2/MJ",
    "electrical_consumption": "kWh/km",
    "combustion_consumption": "kWh/km",
    "fuel_consumption": "L/km",
    "fuel_efficiency": "km/L",
    "electrical_cost_km": "currency/km",
    "fuel_cost_km": "currency/km",
    "energy_km": "J/km",
    "emission_km": "g CO2/km",
    "saved_energy": "kWh/year",
    "avoided_emissions": "t CO2/year",
    "monthly_savings": "currency/month",
    "annual_savings": "currency/year",
    "young_trees": "trees",
    "old_trees": "trees",
}


class UnsupportedFuelError(ValueError):
    """Raised when a comparison is requested for a fuel without a profile."""

    def __init__(self, fuel_type: str, failure: LookupFailure) -> None:
        super().__init__(f"{failure.error}: {fuel_type!r}")
        self.fuel_type = fuel_type
        self.failure = failure


@dataclass(frozen=True)
class ComparisonSummary:
    """Resolved inputs plus every intermediate and headline metric."""

    fuel_type: str
    nominal_energy: float
    autonomy: float
    annual_distance: float
    annual_ipc_pct: float
    monthly_rate: float
    fuel_price: float
    energy_price: float
    fuel_energy: float
    emission_factor: float
    electrical_consumption: float
    combustion_consumption: float
    fuel_consumption: float
    fuel_efficiency: float
    electrical_cost_km: float
    fuel_cost_km: float
    energy_km: float
    emission_km: float
    saved_energy: float
    avoided_emissions: float
    monthly_savings: float
    annual_savings: float
    young_trees: Union[int, float]
    old_trees: Union[int, float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_frame(self) -> pd.DataFrame:
        """Return a metric/value/unit table for display or export."""

        rows = [
            {"metric": key, "value": value, "unit": SUMMARY_UNITS.get(key, "")}
            for key, value in self.to_dict().items()
        ]
        return pd.DataFrame(rows, columns=["metric", "value", "unit"])


def compare_vehicles(
    dataset: EnvironmentDataset,
    fuel_type: str,
    nominal_energy: Optional[float] = None,
    autonomy: Optional[float] = None,
    annual_ipc_pct: Optional[float] = None,
    fuel_price: Optional[float] = None,
    energy_price: Optional[float] = None,
    annual_distance: Optional[float] = None,
) -> ComparisonSummary:
    """Compare an EV against a combustion vehicle burning ``fuel_type``.

    Raises
    ------
    UnsupportedFuelError
        When ``fuel_type`` has no fuel profile.
    """

    lookup = fuel_energy_selector(fuel_type)
    if isinstance(lookup, LookupFailure):
        logger.warning("Fuel type %r is not supported; comparison aborted.", fuel_type)
        raise UnsupportedFuelError(fuel_type, lookup)

    nominal = dataset.nominal_energy if nominal_energy is None else float(nominal_energy)
    autonomy_km = dataset.autonomy_nominal if autonomy is None else float(autonomy)
    ipc_pct = dataset.annual_ipc_pct if annual_ipc_pct is None else float(annual_ipc_pct)
    price_fuel = lookup.fuel_price if fuel_price is None else float(fuel_price)
    price_energy = dataset.energy_price if energy_price is None else float(energy_price)
    distance = dataset.annual_use if annual_distance is None else float(annual_distance)

    calc = EnvironmentCalculator(dataset)
    monthly_rate = ti_month(ipc_pct)
    if monthly_rate == 0:
        logger.warning("Monthly rate is zero; annual savings use the 12x monthly limit.")

    electrical = calc.electrical_consumption(nominal, autonomy_km)
    combustion = calc.combustion_consumption(electrical)
    fuel_l_km = calc.fuel_consumption(combustion, lookup.fuel_energy)
    electrical_cost = calc.cost_electrical_km(electrical, price_energy)
    fuel_cost = calc.fuel_cost_km(price_fuel, fuel_l_km)
    joules = calc.energy_km(combustion)
    grams_km = calc.emission_km(lookup.emision_factor, joules)
    avoided = calc.avoided_emissions(grams_km, distance)
    monthly = calc.monthly_savings(fuel_cost, electrical_cost, distance)

    return ComparisonSummary(
        fuel_type=fuel_type.strip().lower(),
        nominal_energy=nominal,
        autonomy=autonomy_km,
        annual_distance=distance,
        annual_ipc_pct=ipc_pct,
        monthly_rate=monthly_rate,
        fuel_price=price_fuel,
        energy_price=price_energy,
        fuel_energy=lookup.fuel_energy,
        emission_factor=lookup.emision_factor,
        electrical_consumption=electrical,
        combustion_consumption=combustion,
        fuel_consumption=fuel_l_km,
        fuel_efficiency=calc.fuel_efficiency(fuel_l_km),
        electrical_cost_km=electrical_cost,
        fuel_cost_km=fuel_cost,
        energy_km=joules,
        emission_km=grams_km,
        saved_energy=calc.saved_energy(combustion, electrical, distance),
        avoided_emissions=avoided,
        monthly_savings=monthly,
        annual_savings=calc.annual_savings(monthly, monthly_rate),
        young_trees=calc.young_tree(avoided),
        old_trees=calc.old_tree(avoided),
    )


__all__ = [
    "SUMMARY_UNITS",
    "ComparisonSummary",
    "UnsupportedFuelError",
    "compare_vehicles",
]
