"""Streamlit form rendering for the transaction input.

Widget callbacks in :mod:`utils.ui_state` own every state change; the render
functions here only read the current snapshot.
"""

from typing import Any, Dict

import streamlit as st

from services.transaction_state import (
    ProcessorState,
    can_process,
    can_reset,
    validation_details,
)
from utils.ui_state import (
    INPUT_WIDGET_KEY,
    handle_process,
    handle_reset,
    sync_input_from_widget,
)

INPUT_LABEL = "Enter Transaction Values (comma-separated)"
INPUT_PLACEHOLDER = "e.g., 10.5, 25, 3.14, 100, 7.89"
INPUT_HELP = (
    "Enter numerical values separated by commas. Both integers and decimals are accepted. "
    "Press Ctrl+Enter or click outside the box to apply your edits before processing."
)
PROCESS_BUTTON_KEY = "process_values"
RESET_BUTTON_KEY = "reset_values"
DEBUG_CHECKBOX_KEY = "debug_mode"


def render_input_form(state: ProcessorState) -> None:
    """Render the text area plus the Process and Reset buttons."""
    if INPUT_WIDGET_KEY not in st.session_state:
        st.session_state[INPUT_WIDGET_KEY] = state.raw_input

    st.text_area(
        INPUT_LABEL,
        key=INPUT_WIDGET_KEY,
        placeholder=INPUT_PLACEHOLDER,
        height=120,
        on_change=sync_input_from_widget,
    )
    st.caption(INPUT_HELP)

    process_col, reset_col = st.columns(2)
    with process_col:
        st.button(
            "Process Values",
            key=PROCESS_BUTTON_KEY,
            type="primary",
            disabled=not can_process(state),
            on_click=handle_process,
        )
    with reset_col:
        st.button(
            "Reset",
            key=RESET_BUTTON_KEY,
            disabled=not can_reset(state),
            on_click=handle_reset,
        )


def render_debug_details(state: ProcessorState, default_enabled: bool = False) -> bool:
    debug_mode = st.checkbox(
        "Debug mode",
        value=default_enabled,
        help="Show how the last input was tokenized and parsed.",
        key=DEBUG_CHECKBOX_KEY,
    )
    if not debug_mode:
        return False

    recent_state: Dict[str, Any] = {
        "raw_input": state.raw_input or "<blank>",
        "has_processed": state.has_processed,
        "is_valid": state.result.is_valid,
        "errors": list(state.result.errors),
        "numbers": list(state.result.numbers),
        "sort_order": state.sort_order.label,
    }
    with st.expander("Debug: validation details and current state", expanded=False):
        st.write("Validation details:")
        st.markdown("\n".join(f"- {msg}" for msg in validation_details(state)))
        st.write("Current state:")
        st.json(recent_state)
    return True
