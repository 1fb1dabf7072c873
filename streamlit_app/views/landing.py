"""
Landing Screen - login for the Recipe Dashboard.

Shows a short intro and an email/password form. Submitting calls the shell's login;
failures surface as the shell's alert dialog.
"""

import streamlit as st

from recipes_client.shell import AppShell


def render_landing(shell: AppShell) -> None:
    """
    Render the landing screen with the login form.

    Args:
        shell: The session's AppShell
    """
    st.markdown("# 🍲 FoodApp")
    st.markdown("Share your favourite recipes and discover what others are cooking.")

    _, col_form, _ = st.columns([1, 2, 1])
    with col_form:
        with st.form("login_form"):
            st.markdown("### Sign in")
            email = st.text_input("Email", placeholder="you@example.com")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Log in", use_container_width=True)

        if submitted:
            if not email.strip() or not password:
                st.warning("Please enter your email and password.")
                return
            with st.spinner("Signing in…"):
                shell.login(email.strip(), password)
            st.rerun()
