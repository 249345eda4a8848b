from __future__ import annotations

import logging
import math
import os
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, model_validator

from utils.comparison import UnsupportedFuelError, compare_vehicles
from utils.dataset import DEFAULT_DATASET, EnvironmentDataset, dataset_from_mapping
from utils.environment import LookupFailure, fuel_energy_selector
from utils.hydrogen import HydrogenChain
from utils.sweeps import run_sweep

logger = logging.getLogger(__name__)


class ComparisonPayload(BaseModel):
    """Vehicle and market inputs; omitted values fall back to the dataset."""

    fuel_type: str = "diesel"
    nominal_energy: Optional[float] = None
    autonomy: Optional[float] = None
    annual_ipc_pct: Optional[float] = None
    fuel_price: Optional[float] = None
    energy_price: Optional[float] = None
    annual_distance: Optional[float] = None
    dataset_overrides: Dict[str, float] = Field(default_factory=dict)

    def build_dataset(self) -> EnvironmentDataset:
        try:
            return dataset_from_mapping(self.dataset_overrides)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def comparison_kwargs(self) -> Dict[str, Any]:
        return {
            "nominal_energy": self.nominal_energy,
            "autonomy": self.autonomy,
            "annual_ipc_pct": self.annual_ipc_pct,
            "fuel_price": self.fuel_price,
            "energy_price": self.energy_price,
            "annual_distance": self.annual_distance,
        }


class HydrogenRequest(BaseModel):
    nominal_energy: Optional[float] = None
    dataset_overrides: Dict[str, float] = Field(default_factory=dict)


class SweepRequest(ComparisonPayload):
    parameter: Literal["annual_distance", "annual_ipc_pct"] = "annual_distance"
    values: List[float]

    @model_validator(mode="after")
    def _require_values(self) -> "SweepRequest":
        if not self.values:
            raise ValueError("Provide at least one value to sweep.")
        return self


def _json_safe(values: Dict[str, Any]) -> Dict[str, Any]:
    """Replace inf/nan with None; JSON responses cannot carry them."""
    return {
        key: None if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in values.items()
    }


def _comparison_warnings(payload: ComparisonPayload, dataset: EnvironmentDataset) -> List[str]:
    warnings: List[str] = []
    if payload.dataset_overrides:
        keys = ", ".join(sorted(payload.dataset_overrides))
        warnings.append(f"Dataset overrides applied: {keys}.")
    if payload.annual_distance is None:
        warnings.append(f"annual_distance defaulted to dataset annual_use ({dataset.annual_use:g} km).")
    return warnings


app = FastAPI(
    title="EV Comparison Lab API",
    description="REST API for EV vs. combustion cost, emission, and savings comparisons.",
    version="0.1.0",
)


_default_cors_origins = [
    # Vite dev/preview servers
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:4173",
    "http://127.0.0.1:4173",
]
_allowed_origins_env = os.getenv("EVLAB_CORS_ORIGINS", "")
_allowed_origins = [
    origin.strip()
    for origin in _allowed_origins_env.split(",")
    if origin.strip()
] or _default_cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, str]:
    """Simple liveness probe for container orchestrators."""
    return {"status": "ok"}


@app.get("/dataset")
def dataset() -> Dict[str, float]:
    """Return the default parameter dataset."""
    return DEFAULT_DATASET.to_dict()


@app.get("/fuels/{fuel_type}")
def fuel(fuel_type: str) -> Dict[str, float]:
    """Look up price, energy density, and emission factor for a fuel."""

    lookup = fuel_energy_selector(fuel_type)
    if isinstance(lookup, LookupFailure):
        raise HTTPException(status_code=404, detail=lookup.to_dict())
    return lookup.to_dict()


@app.post("/compare")
def compare(request: ComparisonPayload) -> Dict[str, Any]:
    """Run a single EV vs. combustion comparison."""

    dataset_for_run = request.build_dataset()
    try:
        summary = compare_vehicles(dataset_for_run, request.fuel_type, **request.comparison_kwargs())
    except UnsupportedFuelError as exc:
        raise HTTPException(status_code=400, detail=exc.failure.to_dict()) from exc

    return {
        "warnings": _comparison_warnings(request, dataset_for_run),
        "summary": _json_safe(summary.to_dict()),
    }


@app.post("/hydrogen")
def hydrogen(request: HydrogenRequest) -> Dict[str, Optional[float]]:
    """Evaluate the hydrogen production chain for a nominal energy figure."""

    try:
        dataset_for_run = dataset_from_mapping(request.dataset_overrides)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _json_safe(HydrogenChain(dataset_for_run).run(request.nominal_energy).to_dict())


@app.post("/sweep")
def sweep(request: SweepRequest) -> Dict[str, Any]:
    """Sweep annual distance or IPC and return one KPI row per value."""

    dataset_for_run = request.build_dataset()
    fixed = {
        key: value
        for key, value in request.comparison_kwargs().items()
        if key != request.parameter and value is not None
    }
    try:
        results_df = run_sweep(
            dataset_for_run,
            request.fuel_type,
            request.parameter,
            request.values,
            **fixed,
        )
    except UnsupportedFuelError as exc:
        raise HTTPException(status_code=400, detail=exc.failure.to_dict()) from exc

    logger.info("Sweep over %s returned %d rows.", request.parameter, len(results_df))
    return {"rows": [_json_safe(row) for row in results_df.to_dict(orient="records")]}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.server:app", host="0.0.0.0", port=8000, reload=False)
