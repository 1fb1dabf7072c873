"""
Standardized feedback utilities for consistent error, empty, loading and alert states.

Provides reusable components for displaying errors, empty states, loading indicators
and the blocking alert dialog across both screens in a consistent manner.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st

from recipes_client.shell import LEVEL_ERROR


def show_error(message: str, hint: Optional[str] = None) -> None:
    """Show a configuration or startup error, with an optional fix-it hint below it."""
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    action_label: str = "Get started",
    action_url: Optional[str] = None,
) -> None:
    """
    Display a standardized empty state with an optional external link button.

    Args:
        title: Main empty state message
        action_label: Label for the link button
        action_url: Optional URL opened in a new tab when the button is clicked
    """
    st.info(f"📭 **{title}**")
    if action_url:
        st.link_button(action_label, action_url, type="primary")


@contextmanager
def working_spinner(label: str):
    """Spinner shown while the shell waits on the backend."""
    with st.spinner(label):
        yield


@st.dialog("Notice")
def show_alert(level: str, message: str) -> None:
    """
    Show a blocking alert dialog. The user dismisses it before continuing.

    Args:
        level: "error" or "success"
        message: Alert text
    """
    if level == LEVEL_ERROR:
        st.error(message)
    else:
        st.success(message)
    if st.button("OK", type="primary", use_container_width=True):
        st.rerun()
