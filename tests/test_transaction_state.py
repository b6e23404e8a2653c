from services.number_parsing import EMPTY_RESULT
from services.transaction_state import (
    OutputView,
    ProcessorState,
    SortOrder,
    can_process,
    can_reset,
    can_toggle_sort,
    edit_input,
    format_number,
    initial_state,
    output_view,
    process,
    reset,
    sorted_numbers,
    summarize,
    summary_lines,
    toggle_label,
    toggle_sort,
    validation_details,
)


def _processed(raw_input: str) -> ProcessorState:
    return process(edit_input(initial_state(), raw_input))


def test_initial_state_is_idle() -> None:
    state = initial_state()

    assert state.raw_input == ""
    assert state.result == EMPTY_RESULT
    assert not state.has_processed
    assert state.sort_order is SortOrder.ASCENDING
    assert not can_process(state)
    assert not can_reset(state)
    assert output_view(state) is OutputView.NONE


def test_edit_input_does_not_revalidate() -> None:
    state = _processed("10, 5")

    edited = edit_input(state, "abc")

    assert edited.raw_input == "abc"
    assert edited.result == state.result
    assert edited.has_processed
    assert sorted_numbers(edited) == [5.0, 10.0]


def test_process_is_noop_for_blank_input() -> None:
    state = edit_input(initial_state(), "   ")

    assert not can_process(state)
    assert process(state) is state


def test_process_sorts_ascending_with_summary() -> None:
    state = _processed("10, 5, 20, 1")

    assert state.has_processed
    assert output_view(state) is OutputView.RESULTS
    assert sorted_numbers(state) == [1.0, 5.0, 10.0, 20.0]
    assert [f"{label}: {value}" for label, value in summary_lines(summarize(state))] == [
        "Total values: 4",
        "Order: Ascending",
        "Range: 1 to 20",
    ]


def test_errors_hide_results_even_when_numbers_parsed() -> None:
    state = _processed("10, abc, 20")

    assert output_view(state) is OutputView.ERRORS
    assert state.result.errors == ('Value "abc" at position 2 is not a valid number',)
    assert state.result.numbers == (10.0, 20.0)
    assert sorted_numbers(state) == []
    assert summarize(state) is None
    assert not can_toggle_sort(state)


def test_toggle_sort_switches_to_descending() -> None:
    state = toggle_sort(_processed("30, 10, 20"))

    assert state.sort_order is SortOrder.DESCENDING
    assert sorted_numbers(state) == [30.0, 20.0, 10.0]
    assert summarize(state).order_label == "Descending"
    assert toggle_label(state) == "Switch to Ascending"


def test_toggle_twice_restores_order() -> None:
    state = _processed("3, -1, 2.5, 2.5, 0")

    round_trip = toggle_sort(toggle_sort(state))

    assert round_trip == state
    assert sorted_numbers(round_trip) == sorted_numbers(state)


def test_toggle_sort_requires_results() -> None:
    idle = initial_state()
    errored = _processed("x")

    assert toggle_sort(idle) is idle
    assert toggle_sort(errored) is errored


def test_range_ignores_sort_direction() -> None:
    ascending = _processed("4, -2.5, 9, 0")
    descending = toggle_sort(ascending)

    for state in (ascending, descending):
        summary = summarize(state)
        assert summary.minimum == -2.5
        assert summary.maximum == 9.0
        assert summary.total == 4


def test_descending_is_reverse_numeric_order() -> None:
    state = toggle_sort(_processed("1, .5, -3, 5., 2"))

    assert sorted_numbers(state) == [5.0, 2.0, 1.0, 0.5, -3.0]


def test_reprocess_keeps_sort_order_and_replaces_result() -> None:
    state = toggle_sort(_processed("1, 2"))

    state = process(edit_input(state, "7, 3, 5"))

    assert state.sort_order is SortOrder.DESCENDING
    assert sorted_numbers(state) == [7.0, 5.0, 3.0]


def test_reprocess_after_errors_shows_results() -> None:
    state = _processed("1, nope")
    assert output_view(state) is OutputView.ERRORS

    state = process(edit_input(state, "1, 2"))

    assert output_view(state) is OutputView.RESULTS


def test_reset_returns_to_initial_state() -> None:
    state = toggle_sort(_processed("30, 10, 20"))

    cleared = reset(state)

    assert cleared == initial_state()
    assert not can_reset(cleared)
    assert output_view(cleared) is OutputView.NONE


def test_reset_is_noop_before_processing() -> None:
    state = edit_input(initial_state(), "1, 2")

    assert reset(state) is state


def test_processed_whitespace_only_shows_errors() -> None:
    state = _processed(" , , ")

    assert output_view(state) is OutputView.ERRORS
    assert state.result.errors == ("Please enter valid comma-separated values",)


def test_format_number_drops_trailing_zero() -> None:
    assert format_number(5.0) == "5"
    assert format_number(-0.0) == "0"
    assert format_number(0.5) == "0.5"
    assert format_number(3.14) == "3.14"
    assert format_number(-12.0) == "-12"


def test_toggle_label_names_target_direction() -> None:
    assert toggle_label(_processed("1")) == "Switch to Descending"


def test_validation_details_describe_last_result() -> None:
    state = _processed("1,, x")

    details = validation_details(state)

    assert "Raw input: 1,, x" in details
    assert "Tokens: 2" in details
    assert "Parsed numbers: 1" in details
    assert "Errors: 1" in details
