"""
Layout primitives for consistent screen structure.

Provides the connectivity indicator, the dashboard header, and the recipe card grid.
All backend-supplied text is escaped before it is placed into HTML.
"""

import html
from typing import Callable, List, Optional

import streamlit as st

from recipes_client.cards import RecipeCard, chunk_rows, CARDS_PER_ROW


def connectivity_indicator(connected: bool) -> None:
    """
    Render the fixed API connectivity indicator.

    Args:
        connected: Whether the startup probe reached the backend
    """
    modifier = "connected" if connected else "disconnected"
    label = "API Connected" if connected else "API Disconnected"
    st.markdown(
        f'<div class="rd-status rd-status--{modifier}">'
        f'<span class="rd-status__dot"></span>'
        f'<span class="rd-status__label">{label}</span>'
        f'</div>',
        unsafe_allow_html=True,
    )


def page_header(
    title: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    right: Optional[Callable[[], None]] = None,
) -> None:
    """
    Render the dashboard header: title on the left, user info and an action on the right.

    Args:
        title: Main page title
        name: Logged-in user's name
        email: Logged-in user's email
        right: Optional callable that renders right-side controls (e.g. logout button)
    """
    col_title, col_user, col_right = st.columns([6, 3, 1])
    with col_title:
        st.markdown(f"# {title}")
    with col_user:
        st.markdown(
            '<div class="rd-header__user">'
            f'<div class="rd-header__name">{html.escape(name or "")}</div>'
            f'<div class="rd-header__email">{html.escape(email or "")}</div>'
            '</div>',
            unsafe_allow_html=True,
        )
    if right is not None:
        with col_right:
            right()


def recipe_card(card: RecipeCard) -> None:
    """Render a single recipe card. description_html is already escaped."""
    st.markdown(
        '<div class="rd-card">'
        f'<img class="rd-card__image" src="{html.escape(card.thumbnail_url, quote=True)}" '
        f'alt="{html.escape(card.title, quote=True)}">'
        '<div class="rd-card__body">'
        f'<div class="rd-card__title">{html.escape(card.title)}</div>'
        f'<div class="rd-card__description">{card.description_html}</div>'
        f'<div class="rd-card__byline">👤 {html.escape(card.byline)}</div>'
        '</div>'
        '</div>',
        unsafe_allow_html=True,
    )


def recipe_grid(cards: List[RecipeCard], per_row: int = CARDS_PER_ROW) -> None:
    """Render cards in a responsive grid of `per_row` columns."""
    for row in chunk_rows(cards, per_row):
        cols = st.columns(per_row, gap="large")
        for col, card in zip(cols, row):
            with col:
                recipe_card(card)
