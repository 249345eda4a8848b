"""Per-kilometer consumption, cost, and emission formulas for EV comparisons.

This module stays free of UI and HTTP dependencies so it can be reused from
notebooks, the Streamlit page, or the REST API. Formulas that need dataset
constants live on :class:`EnvironmentCalculator`, which receives an
:class:`~utils.dataset.EnvironmentDataset` at construction; the fuel lookup
and the monthly-rate helper read no constants and are plain functions.

No input validation happens here. Degenerate inputs compute arithmetically:
dividing by zero yields ``inf`` (or ``nan`` for ``0 / 0``) instead of raising.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Union

from utils.dataset import EnvironmentDataset

JOULES_PER_KWH = 3_600_000
JOULES_PER_MEGAJOULE = 1_000_000
GRAMS_PER_TON = 1_000_000
KG_PER_TON = 1000
MONTHS_PER_YEAR = 12

INVALID_FUEL_MESSAGE = "Tipo de combustible no valido"
INVALID_FUEL_CODE = 500


@dataclass(frozen=True)
class FuelProfile:
    """Price (currency/L), energy density, and emission factor (g CO2/MJ)."""

    fuel_price: float
    fuel_energy: float
    emision_factor: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class LookupFailure:
    """Returned by :func:`fuel_energy_selector` for unsupported fuel types."""

    error: str
    error_code: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return asdict(self)


FuelLookup = Union[FuelProfile, LookupFailure]

FUEL_PROFILES: Dict[str, FuelProfile] = {
    "gasoline": FuelProfile(fuel_price=16700, fuel_energy=35.58, emision_factor=69.25),
    "diesel": FuelProfile(fuel_price=11795, fuel_energy=40.7, emision_factor=74.01),
}


def ieee_divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: ``x / 0`` is a signed infinity and ``0 / 0`` is nan."""

    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _floor(value: float) -> Union[int, float]:
    """Floor to an ``int``; infinities and nan pass through unchanged."""

    if not math.isfinite(value):
        return value
    return math.floor(value)


def fuel_energy_selector(fuel_type: str) -> FuelLookup:
    """Return the profile for ``fuel_type`` (case-insensitive) or a failure record."""

    key = fuel_type.strip().lower() if isinstance(fuel_type, str) else None
    profile = FUEL_PROFILES.get(key) if key else None
    if profile is None:
        return LookupFailure(error=INVALID_FUEL_MESSAGE, error_code=INVALID_FUEL_CODE)
    return profile


def ti_month(annual_ipc_pct: float) -> float:
    """Convert an annual IPC percent (2.8 = 2.8%) into a compounded monthly rate."""

    base = 1 + annual_ipc_pct / 100
    if base < 0:
        return math.nan
    return base ** (1 / MONTHS_PER_YEAR) - 1


class EnvironmentCalculator:
    """Consumption, cost, emission, savings, and tree-equivalence formulas.

    Every method is pure given its arguments and the injected dataset.
    """

    def __init__(self, dataset: EnvironmentDataset) -> None:
        self.dataset = dataset

    # -- consumption ---------------------------------------------------------

    def electrical_consumption(self, nominal_energy: float, autonomy: float) -> float:
        """kWh/km, derating the advertised autonomy by ``autonomy_factor``."""

        return ieee_divide(nominal_energy, autonomy * self.dataset.autonomy_factor)

    def combustion_consumption(self, electrical_consumption: float) -> float:
        """Energy a combustion engine needs to cover the same kilometer."""

        return ieee_divide(electrical_consumption, self.dataset.combustion_engine_efficiency)

    @staticmethod
    def fuel_consumption(combustion_consumption: float, fuel_energy: float) -> float:
        """Liters per km for a fuel of the given energy density."""

        return ieee_divide(combustion_consumption, fuel_energy)

    @staticmethod
    def fuel_efficiency(fuel_consumption: float) -> float:
        """Kilometers per liter."""

        return ieee_divide(1, fuel_consumption)

    # -- economics -----------------------------------------------------------

    @staticmethod
    def cost_electrical_km(consumption: float, energy_price: float) -> float:
        return consumption * energy_price

    @staticmethod
    def fuel_cost_km(fuel_price: float, fuel_consumption: float) -> float:
        return fuel_price * fuel_consumption

    # -- physics -------------------------------------------------------------

    @staticmethod
    def energy_km(combustion_consumption: float) -> float:
        """Joules per km from kWh per km."""

        return combustion_consumption * JOULES_PER_KWH

    @staticmethod
    def emission_km(emission_factor: float, energy_joules: float) -> float:
        """Grams of CO2 per km; the factor is per megajoule."""

        return emission_factor * (energy_joules / JOULES_PER_MEGAJOULE)

    # -- aggregates ----------------------------------------------------------

    @staticmethod
    def saved_energy(
        combustion_consumption: float,
        electrical_consumption: float,
        annual_distance: float,
    ) -> float:
        """Annual energy saved by driving electric; negative if the EV draws more."""

        return (combustion_consumption - electrical_consumption) * annual_distance

    @staticmethod
    def avoided_emissions(emission_km: float, annual_distance: float) -> float:
        """Tons of CO2 avoided per year."""

        return (emission_km * annual_distance) / GRAMS_PER_TON

    @staticmethod
    def monthly_savings(
        fuel_cost_km: float,
        electrical_cost_km: float,
        annual_distance: float,
    ) -> float:
        return (fuel_cost_km - electrical_cost_km) * annual_distance / MONTHS_PER_YEAR

    @staticmethod
    def annual_savings(monthly_savings: float, monthly_rate: float) -> float:
        """Future value of twelve monthly deposits compounded at ``monthly_rate``.

        A zero rate returns the limit of the annuity factor, ``12 * monthly``.
        """

        if monthly_rate == 0:
            return monthly_savings * MONTHS_PER_YEAR
        growth = (1 + monthly_rate) ** MONTHS_PER_YEAR - 1
        return monthly_savings * growth / monthly_rate

    # -- tree equivalence ----------------------------------------------------

    def young_tree(self, avoided_emissions: float) -> Union[int, float]:
        """Young trees absorbing the avoided tons in one year (floored)."""

        return _floor(ieee_divide(avoided_emissions * KG_PER_TON, self.dataset.young_tree))

    def old_tree(self, avoided_emissions: float) -> Union[int, float]:
        """Mature trees absorbing the avoided tons in one year (floored)."""

        return _floor(ieee_divide(avoided_emissions * KG_PER_TON, self.dataset.old_tree))


__all__ = [
    "FUEL_PROFILES",
    "INVALID_FUEL_CODE",
    "INVALID_FUEL_MESSAGE",
    "EnvironmentCalculator",
    "FuelLookup",
    "FuelProfile",
    "LookupFailure",
    "fuel_energy_selector",
    "ieee_divide",
    "ti_month",
]
