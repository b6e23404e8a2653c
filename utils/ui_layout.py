"""Reusable layout helpers for Streamlit pages."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from utils.settings import AppSettings

FOOTER_TEXT = "Transaction Processor. For assessment/demo purposes."


def init_page_layout(
    settings: AppSettings,
    *,
    main_title: str,
    description: Optional[str] = None,
) -> None:
    """Set the page config and render the shared header.

    ``st.set_page_config`` must run before any other Streamlit call on the page.
    """

    st.set_page_config(page_title=settings.page_title)
    st.title(main_title)
    if description:
        st.caption(description)
    st.divider()


def render_footer() -> None:
    st.divider()
    st.caption(FOOTER_TEXT)
