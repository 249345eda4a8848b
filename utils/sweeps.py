"""Sensitivity sweeps over annual distance and inflation.

Each sweep reruns :func:`utils.comparison.compare_vehicles` once per value and
collects headline KPIs in a tidy DataFrame for charting or download.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd

from utils.comparison import ComparisonSummary, compare_vehicles
from utils.dataset import EnvironmentDataset

logger = logging.getLogger(__name__)

SWEEP_COLUMNS = [
    "monthly_savings",
    "annual_savings",
    "avoided_emissions",
    "young_trees",
    "old_trees",
]

SWEEP_PARAMETERS = ("annual_distance", "annual_ipc_pct")


def generate_values(min_value: float, max_value: float, steps: int) -> List[float]:
    """Return an inclusive list of evenly spaced values.

    ``steps`` below one is treated as one, which returns the midpoint. A
    non-positive span collapses to ``[min_value]``.
    """

    steps = max(1, int(steps))
    if steps == 1:
        return [float((min_value + max_value) / 2.0)]
    if max_value - min_value <= 0:
        return [float(min_value)]
    return [float(v) for v in np.linspace(min_value, max_value, steps)]


def _summary_row(parameter: str, value: float, summary: ComparisonSummary) -> Dict[str, Any]:
    row: Dict[str, Any] = {parameter: float(value)}
    for column in SWEEP_COLUMNS:
        row[column] = getattr(summary, column)
    return row


def run_sweep(
    dataset: EnvironmentDataset,
    fuel_type: str,
    parameter: str,
    values: Sequence[float],
    **overrides: Any,
) -> pd.DataFrame:
    """Vary one comparison input across ``values`` holding ``overrides`` fixed.

    ``parameter`` must be one of :data:`SWEEP_PARAMETERS`. Remaining keyword
    arguments are forwarded to :func:`compare_vehicles`.
    """

    if parameter not in SWEEP_PARAMETERS:
        raise ValueError(f"parameter must be one of {SWEEP_PARAMETERS}")
    if parameter in overrides:
        raise ValueError(f"{parameter} is swept and cannot also be fixed")

    rows: List[Dict[str, Any]] = []
    for value in values:
        summary = compare_vehicles(dataset, fuel_type, **{parameter: value}, **overrides)
        rows.append(_summary_row(parameter, value, summary))

    df = pd.DataFrame(rows, columns=[parameter, *SWEEP_COLUMNS])
    if df.empty:
        logger.warning("Sweep over %s received no values.", parameter)
        return df

    non_finite = ~np.isfinite(df["annual_savings"].astype(float))
    if non_finite.any():
        logger.warning(
            "%d sweep rows produced non-finite annual savings; check %s inputs.",
            int(non_finite.sum()),
            parameter,
        )
    return df


def sweep_annual_distance(
    dataset: EnvironmentDataset,
    fuel_type: str,
    distances: Sequence[float],
    **overrides: Any,
) -> pd.DataFrame:
    return run_sweep(dataset, fuel_type, "annual_distance", distances, **overrides)


def sweep_ipc(
    dataset: EnvironmentDataset,
    fuel_type: str,
    ipc_values: Sequence[float],
    **overrides: Any,
) -> pd.DataFrame:
    return run_sweep(dataset, fuel_type, "annual_ipc_pct", ipc_values, **overrides)


__all__ = [
    "SWEEP_COLUMNS",
    "SWEEP_PARAMETERS",
    "generate_values",
    "run_sweep",
    "sweep_annual_distance",
    "sweep_ipc",
]
