"""Utility helpers shared across Streamlit app modules."""

from utils.settings import AppSettings, get_app_settings
from utils.ui_state import get_processor_state, save_processor_state

__all__ = [
    "AppSettings",
    "get_app_settings",
    "get_processor_state",
    "save_processor_state",
]
