"""
Recipe Dashboard - Streamlit Frontend Main Entry Point.

Run with:
    streamlit run streamlit_app/app.py

This is a single-page app: the screen shown (landing or dashboard) is decided by the
session's AppShell, not by Streamlit's multi-page navigation. On the first render of a
browser session the shell probes the backend and tries to restore an existing session
behind a full-screen loading state.
"""

import logging
import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipes_client without installing it
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipes_client.config import get_log_level, validate_required_config

import streamlit as st

from recipes_client.shell import SCREEN_DASHBOARD
from ui.feedback import show_alert, show_error, working_spinner
from ui.layout import connectivity_indicator
from ui.styles import load_global_styles
from utils.session import get_shell, pop_alert
from views.dashboard import render_dashboard
from views.landing import render_landing

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="FoodApp",
    page_icon="🍲",
    layout="wide",
    initial_sidebar_state="collapsed",
)

load_global_styles()

try:
    validate_required_config()
except RuntimeError as e:
    show_error(str(e), hint="Set APP_ID in .env or the deployment environment and reload.")
    st.stop()

shell = get_shell()

if not shell.state.initialized:
    with working_spinner("Loading application..."):
        shell.probe_and_restore()

connectivity_indicator(shell.state.backend_connected)

alert = pop_alert()
if alert is not None:
    show_alert(*alert)

if shell.visible_screen == SCREEN_DASHBOARD:
    render_dashboard(shell)
else:
    render_landing(shell)
