"""
Utility modules for the Streamlit frontend.

This package contains:
- session: per-browser-session AppShell and alert queue
"""
