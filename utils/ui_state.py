"""Session-scoped storage for the transaction form.

The whole ``ProcessorState`` snapshot lives under one ``st.session_state`` key
and is replaced wholesale by the widget callbacks below. Callbacks run before
the script body on a rerun, so the page always renders the post-action state.
"""

from __future__ import annotations

import streamlit as st

from services.transaction_state import (
    ProcessorState,
    edit_input,
    initial_state,
    process,
    reset,
    toggle_sort,
)

PROCESSOR_STATE_KEY = "transaction_processor_state"
INPUT_WIDGET_KEY = "transaction_input"


def get_processor_state() -> ProcessorState:
    state = st.session_state.get(PROCESSOR_STATE_KEY)
    if state is None:
        state = initial_state()
        st.session_state[PROCESSOR_STATE_KEY] = state
    return state


def save_processor_state(state: ProcessorState) -> None:
    st.session_state[PROCESSOR_STATE_KEY] = state


def _state_with_widget_text() -> ProcessorState:
    # A click can land in the same rerun as an uncommitted text edit.
    state = get_processor_state()
    widget_text = st.session_state.get(INPUT_WIDGET_KEY)
    if widget_text is None or widget_text == state.raw_input:
        return state
    return edit_input(state, widget_text)


def sync_input_from_widget() -> None:
    save_processor_state(_state_with_widget_text())


def handle_process() -> None:
    save_processor_state(process(_state_with_widget_text()))


def handle_reset() -> None:
    state = reset(_state_with_widget_text())
    save_processor_state(state)
    st.session_state[INPUT_WIDGET_KEY] = state.raw_input


def handle_toggle_sort() -> None:
    save_processor_state(toggle_sort(get_processor_state()))
