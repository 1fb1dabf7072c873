"""
Dashboard Screen - recipe creation form and published recipe grid.

Shown once a user is logged in. Loads the published recipe list the first time it is
shown for a user, lets the user create recipes and renders every recipe as a card.
All data operations go through the session's AppShell.
"""

import streamlit as st

from recipes_client.cards import build_recipe_cards
from recipes_client.config import BackendConfig
from recipes_client.forms import FORM_FIELDS, RecipeForm, submit_recipe_form
from recipes_client.shell import AppShell
from ui.feedback import show_empty_state, working_spinner
from ui.layout import page_header, recipe_grid
from utils.session import clear_recipes_loaded, mark_recipes_loaded, recipes_loaded_for

FORM_KEY_PREFIX = "recipe_form_"
FORM_RESET_KEY = "recipe_form_reset"


def _widget_key(name: str) -> str:
    return f"{FORM_KEY_PREFIX}{name}"


def _reset_form_widgets_if_requested() -> None:
    # Widget values can only be changed before the widgets are instantiated in a run.
    if st.session_state.pop(FORM_RESET_KEY, False):
        for name in FORM_FIELDS:
            st.session_state[_widget_key(name)] = ""


def _render_logout_button(shell: AppShell) -> None:
    if st.button("⎋", key="logout_btn", help="Logout"):
        shell.logout()
        clear_recipes_loaded()
        st.rerun()


def _render_create_form(shell: AppShell) -> None:
    user = shell.state.current_user

    with st.container(border=True):
        st.markdown("### ➕ Create New Recipe")
        with st.form("create_recipe_form"):
            st.text_input("Recipe Title", key=_widget_key("title"), placeholder="Recipe Title")
            st.text_area("Short Description", key=_widget_key("description"), height=80)
            st.text_area("Ingredients", key=_widget_key("ingredients"), height=100)
            st.text_area("Instructions", key=_widget_key("instructions"), height=120)
            submitted = st.form_submit_button("Create Recipe")

    if not submitted:
        return

    form = RecipeForm(**{name: st.session_state.get(_widget_key(name), "") for name in FORM_FIELDS})
    if not form.is_valid:
        st.warning("Please enter a recipe title.")
        return

    with working_spinner("Creating..."):
        submit_recipe_form(form, user, shell.create_recipe)
    st.session_state[FORM_RESET_KEY] = True
    st.rerun()


def render_dashboard(shell: AppShell) -> None:
    """
    Render the dashboard for the logged-in user.

    Args:
        shell: The session's AppShell (state.current_user must be set)
    """
    user = shell.state.current_user

    if not recipes_loaded_for(user.id):
        with working_spinner("Loading recipes..."):
            shell.load_recipes()
        mark_recipes_loaded(user.id)

    _reset_form_widgets_if_requested()

    page_header(
        "FoodApp Dashboard",
        name=user.name,
        email=user.email,
        right=lambda: _render_logout_button(shell),
    )

    _render_create_form(shell)

    st.markdown("## Published Recipes")
    if not shell.state.recipes:
        show_empty_state(
            "No published recipes yet. Create your first one above!",
            action_label="Manage in Admin Panel",
            action_url=BackendConfig.get_admin_url(),
        )
        return

    recipe_grid(build_recipe_cards(shell.state.recipes))
