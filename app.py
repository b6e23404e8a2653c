# app.py — Transaction Processor
# - Validates comma-separated decimal values and lists them sorted
# - Per-token error reporting, ascending/descending toggle, CSV download
# Launch with: streamlit run app.py

import streamlit as st

from frontend.ui.forms import render_debug_details, render_input_form
from frontend.ui.rendering import render_output
from utils.settings import get_app_settings
from utils.ui_layout import init_page_layout, render_footer
from utils.ui_state import get_processor_state


def run_app():
    settings = get_app_settings()
    init_page_layout(
        settings,
        main_title="Transaction Processor",
        description="Enter comma separated numbers to sort (simple tool)",
    )

    state = get_processor_state()
    render_input_form(state)
    render_output(state)

    with st.sidebar:
        render_debug_details(state, default_enabled=settings.debug_default)

    render_footer()


if __name__ == "__main__":
    run_app()
