# app.py — EV Comparison Lab
# - EV vs. combustion per-km cost, CO2, savings, and tree equivalents
# - Distance sensitivity sweep and hydrogen production chain

import streamlit as st

from frontend.ui.charts import build_emissions_chart, build_savings_chart
from frontend.ui.forms import render_comparison_form, select_active_form
from frontend.ui.metrics import compute_kpis, render_primary_metrics
from utils.comparison import UnsupportedFuelError, compare_vehicles
from utils.dataset import DEFAULT_DATASET
from utils.hydrogen import HydrogenChain
from utils.sweeps import sweep_annual_distance


def run_app():
    st.set_page_config(page_title="EV Comparison Lab", layout="wide")
    st.title("EV Comparison Lab — electric vs. combustion")

    with st.expander("Help & Guide (click to open)", expanded=False):
        st.markdown("""
    ### How to get started
    1) Pick the **fuel type** of the combustion vehicle you are replacing.
    2) Enter the EV's **nominal battery energy** and **advertised autonomy**.
    3) Adjust prices, **annual distance**, and the **annual IPC** used to compound savings.
    4) Press **Compare** and review the cards, the metric table, and the sweep charts.

    ### Helpful notes
    - Autonomy is derated to a realistic range before computing kWh/km.
    - Avoided emissions are the combustion-equivalent CO2 over the annual distance.
    - Tree equivalents round down to whole trees.
    """)

    dataset = DEFAULT_DATASET
    submitted_form = render_comparison_form(dataset)

    if submitted_form.run_submitted and not submitted_form.is_valid:
        for message in submitted_form.validation_errors:
            st.error(message)
        st.stop()

    form = select_active_form(submitted_form, st.session_state)
    if form is None:
        st.info("Set the vehicle and market inputs in the sidebar, then press **Compare**.")
        st.stop()

    try:
        summary = compare_vehicles(dataset, form.fuel_type, **form.comparison_kwargs())
    except UnsupportedFuelError as exc:
        st.error(str(exc))
        st.stop()

    render_primary_metrics(compute_kpis(summary))

    summary_df = summary.to_frame()
    st.subheader("Comparison details")
    st.dataframe(summary_df, hide_index=True, use_container_width=True)
    st.download_button(
        "Download comparison (CSV)",
        summary_df.to_csv(index=False).encode("utf-8"),
        file_name="ev_comparison.csv",
        mime="text/csv",
    )

    if form.sweep_distances:
        st.subheader("Annual distance sensitivity")
        fixed = {k: v for k, v in form.comparison_kwargs().items() if k != "annual_distance"}
        sweep_df = sweep_annual_distance(dataset, form.fuel_type, form.sweep_distances, **fixed)
        c1, c2 = st.columns(2)
        c1.altair_chart(build_savings_chart(sweep_df, "annual_distance"), use_container_width=True)
        c2.altair_chart(build_emissions_chart(sweep_df, "annual_distance"), use_container_width=True)

    with st.expander("Hydrogen production chain", expanded=False):
        st.caption(
            "Energy to compress, store, and electrolyse hydrogen for the same nominal energy. "
            f"Compressor efficiency {dataset.compresor_eficiency_factor:.2f}, "
            f"cell efficiency {dataset.cell_fuel_eficiency_factor:.2f}."
        )
        chain = HydrogenChain(dataset).run(form.nominal_energy)
        st.json(chain.to_dict())


if __name__ == "__main__":
    run_app()
