"""App settings resolved from Streamlit secrets, the environment or defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

import streamlit as st
from streamlit.errors import StreamlitSecretNotFoundError

DEFAULT_PAGE_TITLE = "Transaction Processor"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppSettings:
    page_title: str = DEFAULT_PAGE_TITLE
    debug_default: bool = False


def _read_secret(key: str) -> Optional[Any]:
    try:
        return st.secrets.get(key)
    except StreamlitSecretNotFoundError:
        return None


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def get_app_settings() -> AppSettings:
    """Return the app settings.

    The lookup order is Streamlit secrets → environment variable → built-in default.
    """

    page_title = (
        _read_secret("transaction_processor_title")
        or os.environ.get("TRANSACTION_PROCESSOR_TITLE")
        or DEFAULT_PAGE_TITLE
    )

    debug_value = _read_secret("transaction_processor_debug")
    if debug_value is None:
        debug_value = os.environ.get("TRANSACTION_PROCESSOR_DEBUG", "")

    return AppSettings(page_title=str(page_title), debug_default=_coerce_bool(debug_value))
