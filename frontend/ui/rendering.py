"""Shared rendering helpers for the transaction results."""

import re
from typing import Sequence

import pandas as pd
import streamlit as st

from services.transaction_state import (
    OutputView,
    ProcessorState,
    format_number,
    output_view,
    sorted_numbers,
    summarize,
    summary_lines,
    toggle_label,
)
from utils.ui_state import handle_toggle_sort

ERRORS_TITLE = "Validation Errors:"
RESULTS_TITLE = "Sorted Results:"
TOGGLE_BUTTON_KEY = "toggle_sort"
POSITION_COLUMN = "Position"
VALUE_COLUMN = "Value"

# Markdown syntax characters, escaped so user tokens render literally.
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]$:<>#])")


def build_results_frame(numbers: Sequence[float]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            POSITION_COLUMN: list(range(1, len(numbers) + 1)),
            VALUE_COLUMN: [float(value) for value in numbers],
        }
    )


def results_csv_bytes(numbers: Sequence[float]) -> bytes:
    """Encode the sorted values as CSV, keeping the on-screen number format."""

    frame = build_results_frame(numbers)
    frame[VALUE_COLUMN] = frame[VALUE_COLUMN].map(format_number)
    return frame.to_csv(index=False).encode("utf-8")


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def render_validation_errors(errors: Sequence[str]) -> None:
    """Show every error in one alert, with user tokens rendered literally."""
    body = "\n".join(f"- {escape_markdown(error)}" for error in errors)
    st.error(f"**{ERRORS_TITLE}**\n\n{body}")


def render_sorted_results(state: ProcessorState) -> None:
    summary = summarize(state)
    if summary is None:
        return

    numbers = sorted_numbers(state)
    header_col, toggle_col = st.columns([3, 1])
    with header_col:
        st.subheader(RESULTS_TITLE)
    with toggle_col:
        st.button(
            toggle_label(state),
            key=TOGGLE_BUTTON_KEY,
            help="Flip the display order of the sorted values.",
            on_click=handle_toggle_sort,
        )

    st.dataframe(
        build_results_frame(numbers).style.format({VALUE_COLUMN: format_number}),
        hide_index=True,
    )

    for label, value in summary_lines(summary):
        st.markdown(f"**{label}:** {value}")

    st.download_button(
        "Download sorted values (CSV)",
        results_csv_bytes(numbers),
        file_name="sorted_transaction_values.csv",
        mime="text/csv",
    )


def render_output(state: ProcessorState) -> None:
    """Render whichever block belongs below the form for ``state``."""
    view = output_view(state)
    if view is OutputView.ERRORS:
        render_validation_errors(state.result.errors)
    elif view is OutputView.RESULTS:
        render_sorted_results(state)
