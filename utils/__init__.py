"""Calculation helpers shared by the Streamlit page and the REST API."""

from utils.comparison import ComparisonSummary, UnsupportedFuelError, compare_vehicles
from utils.dataset import DEFAULT_DATASET, EnvironmentDataset, dataset_from_mapping
from utils.environment import (
    EnvironmentCalculator,
    FuelProfile,
    LookupFailure,
    fuel_energy_selector,
    ti_month,
)
from utils.hydrogen import HydrogenChain, HydrogenChainResult

__all__ = [
    "DEFAULT_DATASET",
    "ComparisonSummary",
    "EnvironmentCalculator",
    "EnvironmentDataset",
    "FuelProfile",
    "HydrogenChain",
    "HydrogenChainResult",
    "LookupFailure",
    "UnsupportedFuelError",
    "compare_vehicles",
    "dataset_from_mapping",
    "fuel_energy_selector",
    "ti_month",
]
