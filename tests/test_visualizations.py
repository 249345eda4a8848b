import pandas as pd

from frontend.ui.charts import build_emissions_chart, build_savings_chart, prepare_savings_long
from utils.dataset import DEFAULT_DATASET
from utils.sweeps import sweep_annual_distance


def test_prepare_savings_long_shape() -> None:
    sweep_df = sweep_annual_distance(DEFAULT_DATASET, "diesel", [5000.0, 10000.0, 15000.0])

    long_df = prepare_savings_long(sweep_df, "annual_distance")

    assert long_df.shape == (6, 3)
    assert set(long_df["Series"]) == {"Monthly", "Annual"}


def test_prepare_savings_long_empty() -> None:
    long_df = prepare_savings_long(pd.DataFrame(), "annual_distance")

    assert long_df.empty
    assert list(long_df.columns) == ["annual_distance", "Series", "Savings"]


def test_charts_build_from_sweep() -> None:
    sweep_df = sweep_annual_distance(DEFAULT_DATASET, "gasoline", [5000.0, 10000.0])

    savings = build_savings_chart(sweep_df, "annual_distance").to_dict()
    emissions = build_emissions_chart(sweep_df, "annual_distance").to_dict()

    assert savings["encoding"]["x"]["field"] == "annual_distance"
    assert emissions["encoding"]["y"]["field"] == "avoided_emissions"
