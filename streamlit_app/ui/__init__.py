"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Recipe Dashboard Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import connectivity_indicator, page_header, recipe_grid

__all__ = [
    "load_global_styles",
    "connectivity_indicator",
    "page_header",
    "recipe_grid",
]
