from __future__ import annotations

import math

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from api.server import (
    ComparisonPayload,
    HydrogenRequest,
    SweepRequest,
    compare,
    dataset,
    fuel,
    health,
    hydrogen,
    sweep,
)


def test_health() -> None:
    assert health() == {"status": "ok"}


def test_dataset_exposes_defaults() -> None:
    data = dataset()

    assert data["compresor_eficiency_factor"] == 0.95
    assert data["annual_use"] == 10000


def test_fuel_lookup_and_missing_fuel() -> None:
    assert fuel("Diesel") == {"fuel_price": 11795, "fuel_energy": 40.7, "emision_factor": 74.01}

    with pytest.raises(HTTPException) as excinfo:
        fuel("electric")
    assert excinfo.value.status_code == 404
    assert excinfo.value.detail["error_code"] == 500


def test_compare_with_defaults() -> None:
    response = compare(ComparisonPayload())

    summary = response["summary"]
    assert summary["fuel_type"] == "diesel"
    assert summary["annual_distance"] == 10000
    assert any("annual_use" in msg for msg in response["warnings"])


def test_compare_applies_dataset_overrides() -> None:
    base = compare(ComparisonPayload(annual_distance=12000))["summary"]
    response = compare(
        ComparisonPayload(annual_distance=12000, dataset_overrides={"young_tree": 20})
    )

    assert response["summary"]["young_trees"] == math.floor(base["avoided_emissions"] * 1000 / 20)
    assert any("young_tree" in msg for msg in response["warnings"])


def test_compare_rejects_unknown_fuel_and_overrides() -> None:
    with pytest.raises(HTTPException) as excinfo:
        compare(ComparisonPayload(fuel_type="biofuel"))
    assert excinfo.value.status_code == 400

    with pytest.raises(HTTPException) as excinfo:
        compare(ComparisonPayload(dataset_overrides={"not_a_key": 1.0}))
    assert excinfo.value.status_code == 400


def test_hydrogen_chain_endpoint() -> None:
    response = hydrogen(HydrogenRequest(nominal_energy=8.14))

    assert response["energy_h2_cylinders"] == pytest.approx(8.14 / 0.95)
    assert response["liters_required"] > response["hydrogen_mass"]


def test_sweep_returns_one_row_per_value() -> None:
    response = sweep(SweepRequest(values=[5000.0, 15000.0], annual_ipc_pct=3.0))

    assert len(response["rows"]) == 2
    assert response["rows"][0]["annual_distance"] == 5000.0
    assert response["rows"][1]["monthly_savings"] > response["rows"][0]["monthly_savings"]


def test_sweep_requires_values() -> None:
    with pytest.raises(ValidationError):
        SweepRequest(values=[])


def test_hydrogen_zero_efficiency_returns_null_stages() -> None:
    response = hydrogen(
        HydrogenRequest(nominal_energy=8.14, dataset_overrides={"compresor_eficiency_factor": 0})
    )

    assert response["nominal_energy"] == 8.14
    assert response["energy_h2_cylinders"] is None
    assert response["liters_required"] is None


def test_compare_zero_tree_absorption_returns_null_tree_counts() -> None:
    response = compare(ComparisonPayload(dataset_overrides={"young_tree": 0, "old_tree": 0}))

    summary = response["summary"]
    assert summary["young_trees"] is None
    assert summary["old_trees"] is None
    assert summary["avoided_emissions"] > 0
