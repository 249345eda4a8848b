"""Chart and data prep helpers for Streamlit visualizations."""

import altair as alt
import pandas as pd

_AXIS_TITLES = {
    "annual_distance": "Annual distance (km)",
    "annual_ipc_pct": "Annual IPC (%)",
}


def prepare_savings_long(sweep_df: pd.DataFrame, parameter: str) -> pd.DataFrame:
    """Melt monthly/annual savings into long form for a two-series line chart."""
    if sweep_df.empty:
        return pd.DataFrame(columns=[parameter, "Series", "Savings"])

    long_df = sweep_df.melt(
        id_vars=[parameter],
        value_vars=["monthly_savings", "annual_savings"],
        var_name="Series",
        value_name="Savings",
    )
    long_df["Series"] = long_df["Series"].replace(
        {"monthly_savings": "Monthly", "annual_savings": "Annual"}
    )
    return long_df


def build_savings_chart(sweep_df: pd.DataFrame, parameter: str) -> alt.Chart:
    """Return a line chart of savings against the swept parameter."""
    long_df = prepare_savings_long(sweep_df, parameter)
    title = _AXIS_TITLES.get(parameter, parameter)
    return (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=alt.X(f"{parameter}:Q", title=title),
            y=alt.Y("Savings:Q", title="Savings (currency)"),
            color=alt.Color(
                "Series:N",
                scale=alt.Scale(domain=["Monthly", "Annual"], range=["#86c5da", "#7fd18b"]),
            ),
            tooltip=[
                alt.Tooltip(f"{parameter}:Q", title=title, format=",.2f"),
                alt.Tooltip("Series:N"),
                alt.Tooltip("Savings:Q", format=",.0f"),
            ],
        )
    )


def build_emissions_chart(sweep_df: pd.DataFrame, parameter: str) -> alt.Chart:
    """Return a bar chart of avoided tons of CO2 per swept value."""
    title = _AXIS_TITLES.get(parameter, parameter)
    return (
        alt.Chart(sweep_df)
        .mark_bar(opacity=0.85, color="#7fd18b")
        .encode(
            x=alt.X(f"{parameter}:O", title=title),
            y=alt.Y("avoided_emissions:Q", title="Avoided CO2 (t/yr)"),
            tooltip=[
                alt.Tooltip("avoided_emissions:Q", title="t CO2/yr", format=".2f"),
                alt.Tooltip("young_trees:Q", title="Young trees"),
                alt.Tooltip("old_trees:Q", title="Mature trees"),
            ],
        )
    )
