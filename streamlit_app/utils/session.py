"""
Session management utilities for the Streamlit app.

This module keeps one AppShell per browser session in st.session_state and bridges the
shell's notifier to Streamlit: alerts are queued in session state and shown as a dialog
on the next render.

The shell (and its backend token) persists across reruns within the same browser
session. Refreshing the page starts a new session, which starts logged out.
"""

from typing import Optional, Tuple

import streamlit as st

from recipes_client.shell import AppShell

SHELL_KEY = "app_shell"
ALERTS_KEY = "pending_alerts"
RECIPES_LOADED_KEY = "recipes_loaded_for"


def queue_alert(level: str, message: str) -> None:
    """Notifier handed to the shell. Stores the alert until the next render."""
    st.session_state.setdefault(ALERTS_KEY, []).append((level, message))


def pop_alert() -> Optional[Tuple[str, str]]:
    """Take the oldest pending alert, if any."""
    alerts = st.session_state.get(ALERTS_KEY) or []
    if not alerts:
        return None
    return alerts.pop(0)


def get_shell() -> AppShell:
    """
    Get or create the AppShell for this browser session.

    Returns:
        The session's AppShell, wired to queue_alert
    """
    if SHELL_KEY not in st.session_state:
        st.session_state[SHELL_KEY] = AppShell(notify=queue_alert)
    return st.session_state[SHELL_KEY]


def recipes_loaded_for(user_id) -> bool:
    """Whether the dashboard already loaded recipes for this user in this session."""
    return st.session_state.get(RECIPES_LOADED_KEY) == user_id


def mark_recipes_loaded(user_id) -> None:
    st.session_state[RECIPES_LOADED_KEY] = user_id


def clear_recipes_loaded() -> None:
    st.session_state.pop(RECIPES_LOADED_KEY, None)
