"""Default parameter dataset shared by the calculators.

The record is immutable so a single instance can be handed to every
calculator, request handler, and sweep without defensive copies. Key names
mirror the historical dataset literally (including its spelling) because
downstream callers address values by these names.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class EnvironmentDataset:
    """Efficiency factors, energy densities, prices, and baselines.

    Units are implicit per formula: energy densities in MJ/L (or kWh
    equivalents as the formulas treat them), emission factors in g CO2/MJ,
    tree absorption in kg CO2/year, ``energy_price`` in currency/kWh, and
    ``annual_use`` in km/year. ``annual_ipc_pct`` is a percent (2.8 = 2.8%).

    The historical literal assigned ``compresor_eficiency_factor`` (0.8, then
    0.95) and ``cell_fuel_eficiency_factor`` (0.6, then 0.54) twice; only the
    last assignment was ever observable, so those are the defaults here.
    """

    avg_speed: float = 50
    autonomy_factor: float = 0.9
    base_weight: float = 20000
    base_km: float = 98550
    compresor_eficiency_factor: float = 0.95
    cell_fuel_eficiency_factor: float = 0.54
    checked_percentage: float = 0.05
    combustion_engine_efficiency: float = 0.27
    diesel_energy: float = 40.7
    electrolysis_eficiency_factor: float = 0.76
    emision_factor_gasoline: float = 69.25
    emision_factor_diesel: float = 74.01
    gasoline_energy: float = 35.58
    hydrogen_energy_density: float = 33.33
    km_checked: float = 200000
    nox_reduction_factor: float = 0.9
    old_tree: float = 30
    operation_factor: float = 0.9
    percentage_consumption_savings: float = 0.1
    percentage_urea_consumption: float = 0.07
    water_h2_weight: float = 9
    young_tree: float = 10
    nominal_energy: float = 8.14
    autonomy_nominal: float = 14.7
    energy_price: float = 978.81
    annual_use: float = 10000
    annual_ipc_pct: float = 2.8

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_DATASET = EnvironmentDataset()

DATASET_KEYS = tuple(f.name for f in fields(EnvironmentDataset))


def dataset_from_mapping(
    overrides: Mapping[str, Any] | None,
    base: EnvironmentDataset = DEFAULT_DATASET,
) -> EnvironmentDataset:
    """Return a copy of ``base`` with ``overrides`` applied.

    Unknown keys raise ``ValueError`` so typos in request payloads do not
    silently fall back to defaults. Values are coerced to ``float``.
    """

    if not overrides:
        return base

    unknown = sorted(set(overrides) - set(DATASET_KEYS))
    if unknown:
        raise ValueError(f"Unknown dataset keys: {', '.join(unknown)}")

    coerced: Dict[str, float] = {}
    for key, value in overrides.items():
        try:
            coerced[key] = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{key} must be numeric, got {value!r}") from exc

    return replace(base, **coerced)


__all__ = [
    "DATASET_KEYS",
    "DEFAULT_DATASET",
    "EnvironmentDataset",
    "dataset_from_mapping",
]
