import math

import pytest

from frontend.ui.metrics import _fmt_number, _fmt_percent, compute_kpis
from utils.comparison import compare_vehicles
from utils.dataset import DEFAULT_DATASET


def test_compute_kpis_derives_cost_ratio() -> None:
    summary = compare_vehicles(DEFAULT_DATASET, "diesel", nominal_energy=81.14, autonomy=200)
    kpis = compute_kpis(summary)

    assert kpis.cost_ratio == pytest.approx(summary.electrical_cost_km / summary.fuel_cost_km)
    assert kpis.young_trees == summary.young_trees
    assert kpis.annual_savings == summary.annual_savings


def test_compute_kpis_handles_zero_fuel_cost() -> None:
    summary = compare_vehicles(DEFAULT_DATASET, "diesel", fuel_price=0)
    kpis = compute_kpis(summary)

    assert math.isnan(kpis.cost_ratio)


def test_formatters_hide_non_finite_values() -> None:
    assert _fmt_number(float("nan")) == "—"
    assert _fmt_number(float("inf")) == "—"
    assert _fmt_number(1234.567) == "1,234.57"
    assert _fmt_percent(0.25, as_fraction=True) == "25.00%"
