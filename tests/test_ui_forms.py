from frontend.ui.forms import (
    LAST_FORM_KEY,
    ComparisonFormResult,
    fuel_price_override,
    select_active_form,
)
from utils.comparison import compare_vehicles
from utils.dataset import DEFAULT_DATASET


def _form(**overrides) -> ComparisonFormResult:
    values = dict(
        fuel_type="diesel",
        nominal_energy=81.14,
        autonomy=200.0,
        annual_ipc_pct=2.8,
        fuel_price=None,
        energy_price=978.81,
        annual_distance=10000.0,
    )
    values.update(overrides)
    return ComparisonFormResult(**values)


def test_nothing_to_show_before_first_submit() -> None:
    state = {}

    assert select_active_form(_form(run_submitted=False), state) is None
    assert LAST_FORM_KEY not in state


def test_submitted_form_is_stored_and_reused_until_next_submit() -> None:
    state = {}
    first = _form(run_submitted=True)
    assert select_active_form(first, state) is first

    edited = _form(annual_distance=25000.0, run_submitted=False)
    assert select_active_form(edited, state) is first

    resubmitted = _form(annual_distance=25000.0, run_submitted=True)
    assert select_active_form(resubmitted, state) is resubmitted
    assert state[LAST_FORM_KEY] is resubmitted


def test_invalid_submission_keeps_previous_results() -> None:
    state = {}
    first = _form(run_submitted=True)
    select_active_form(first, state)

    invalid = _form(autonomy=0.0, run_submitted=True, validation_errors=["Autonomy must be greater than zero."])
    assert select_active_form(invalid, state) is first


def test_reference_price_follows_selected_fuel() -> None:
    assert fuel_price_override(True, 9000.0) is None
    assert fuel_price_override(False, 9000.0) == 9000.0

    gasoline = compare_vehicles(DEFAULT_DATASET, "gasoline", **_form(fuel_type="gasoline").comparison_kwargs())
    diesel = compare_vehicles(DEFAULT_DATASET, "diesel", **_form().comparison_kwargs())
    assert gasoline.fuel_price == 16700
    assert diesel.fuel_price == 11795
