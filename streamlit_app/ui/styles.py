"""
Global CSS Styling for the Recipe Dashboard.

This module provides load_global_styles() to inject consistent styling
across all screens. Focuses on typography, the connectivity indicator and the
recipe card grid.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Dashboard.

    This function:
    - Sets a clean sans-serif font and heading weights
    - Pins the API connectivity indicator to the top-right corner
    - Styles recipe cards (image, title, description, byline)
    - Styles the empty state and the page header
    """
    css = """
    <style>
        html, body, [class*="css"] {
            font-family: 'Inter', 'Helvetica Neue', sans-serif !important;
        }

        h1, h2, h3 {
            font-weight: 700 !important;
            color: #111827 !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 2rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Connectivity indicator - fixed, always visible */
        .rd-status {
            position: fixed;
            top: 1rem;
            right: 1rem;
            z-index: 1000;
            display: flex;
            align-items: center;
            gap: 0.5rem;
            padding: 0.25rem 0.75rem;
            background: #ffffff;
            border-radius: 999px;
            box-shadow: 0 1px 4px rgba(0, 0, 0, 0.08);
            font-size: 0.875rem;
            font-weight: 500;
        }

        .rd-status__dot {
            width: 0.75rem;
            height: 0.75rem;
            border-radius: 50%;
        }

        .rd-status--connected .rd-status__dot { background: #22c55e; }
        .rd-status--connected .rd-status__label { color: #374151; }
        .rd-status--disconnected .rd-status__dot { background: #ef4444; }
        .rd-status--disconnected .rd-status__label { color: #dc2626; }

        /* Page header */
        .rd-header__user {
            text-align: right;
            line-height: 1.3;
        }

        .rd-header__name {
            font-weight: 600;
            color: #1f2937;
        }

        .rd-header__email {
            font-size: 0.875rem;
            color: #6b7280;
        }

        /* Recipe cards */
        .rd-card {
            background: #ffffff;
            border-radius: 0.5rem;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1);
            overflow: hidden;
            margin-bottom: 2rem;
            transition: transform 0.3s ease;
        }

        .rd-card:hover {
            transform: translateY(-4px);
        }

        .rd-card__image {
            width: 100%;
            height: 14rem;
            object-fit: cover;
            display: block;
        }

        .rd-card__body {
            padding: 1.5rem;
        }

        .rd-card__title {
            font-weight: 700;
            font-size: 1.25rem;
            margin-bottom: 0.5rem;
            color: #111827;
        }

        .rd-card__description {
            color: #374151;
            margin-bottom: 1rem;
        }

        .rd-card__byline {
            font-size: 0.875rem;
            color: #6b7280;
        }

        /* Form submit button */
        .stFormSubmitButton > button {
            background-color: #4f46e5 !important;
            color: #ffffff !important;
            font-weight: 600 !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
