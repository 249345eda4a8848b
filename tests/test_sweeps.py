import pytest

from utils.comparison import UnsupportedFuelError, compare_vehicles
from utils.dataset import DEFAULT_DATASET
from utils.sweeps import SWEEP_COLUMNS, generate_values, run_sweep, sweep_annual_distance, sweep_ipc


def test_generate_values_inclusive_range() -> None:
    assert generate_values(0.0, 10000.0, 3) == [0.0, 5000.0, 10000.0]


def test_generate_values_single_step_returns_midpoint() -> None:
    assert generate_values(2.0, 4.0, 1) == [3.0]
    assert generate_values(2.0, 4.0, 0) == [3.0]


def test_generate_values_collapses_empty_span() -> None:
    assert generate_values(5.0, 5.0, 4) == [5.0]


def test_distance_sweep_rows_match_single_comparisons() -> None:
    distances = [5000.0, 10000.0, 20000.0]
    df = sweep_annual_distance(DEFAULT_DATASET, "diesel", distances, nominal_energy=81.14, autonomy=200)

    assert list(df.columns) == ["annual_distance", *SWEEP_COLUMNS]
    assert df["annual_distance"].tolist() == distances
    for distance, row in zip(distances, df.itertuples(index=False)):
        summary = compare_vehicles(
            DEFAULT_DATASET, "diesel", nominal_energy=81.14, autonomy=200, annual_distance=distance
        )
        assert row.monthly_savings == pytest.approx(summary.monthly_savings)
        assert row.avoided_emissions == pytest.approx(summary.avoided_emissions)
        assert row.young_trees == summary.young_trees


def test_savings_and_emissions_scale_with_distance() -> None:
    df = sweep_annual_distance(DEFAULT_DATASET, "gasoline", [5000.0, 10000.0])

    assert df["avoided_emissions"].iloc[1] == pytest.approx(2 * df["avoided_emissions"].iloc[0])
    assert df["monthly_savings"].iloc[1] == pytest.approx(2 * df["monthly_savings"].iloc[0])


def test_ipc_sweep_increases_annual_savings_when_positive() -> None:
    df = sweep_ipc(DEFAULT_DATASET, "diesel", [0.0, 2.8, 6.0], nominal_energy=81.14, autonomy=200)

    assert df["annual_ipc_pct"].tolist() == [0.0, 2.8, 6.0]
    assert df["annual_savings"].iloc[0] == pytest.approx(df["monthly_savings"].iloc[0] * 12)
    assert df["annual_savings"].is_monotonic_increasing


def test_empty_sweep_returns_empty_frame() -> None:
    df = sweep_annual_distance(DEFAULT_DATASET, "diesel", [])

    assert df.empty
    assert list(df.columns) == ["annual_distance", *SWEEP_COLUMNS]


def test_invalid_parameter_raises() -> None:
    with pytest.raises(ValueError):
        run_sweep(DEFAULT_DATASET, "diesel", "fuel_price", [1.0])


def test_swept_parameter_cannot_be_fixed() -> None:
    with pytest.raises(ValueError):
        sweep_annual_distance(DEFAULT_DATASET, "diesel", [1.0], annual_distance=2.0)


def test_unsupported_fuel_propagates() -> None:
    with pytest.raises(UnsupportedFuelError):
        sweep_annual_distance(DEFAULT_DATASET, "electric", [1000.0])
