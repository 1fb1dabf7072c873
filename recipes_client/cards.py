"""
View models for the recipe card grid.

Turns Recipe records into the values a card displays: thumbnail (with a placeholder),
title, description and author name (with a fallback). Descriptions are stored as free
text that may contain markup; they are escaped and only line breaks are kept, so no
backend-supplied HTML reaches the page.
"""

import html
from dataclasses import dataclass
from typing import Iterable, List, Optional

from recipes_client.models import Recipe, RecordId

PLACEHOLDER_IMAGE_URL = "https://placehold.co/400x300"
UNKNOWN_AUTHOR = "Unknown Author"
CARDS_PER_ROW = 3


@dataclass(frozen=True)
class RecipeCard:
    recipe_id: RecordId
    title: str
    description_html: str
    thumbnail_url: str
    author_name: str

    @property
    def byline(self) -> str:
        return f"By {self.author_name}"


def render_description(text: Optional[str]) -> str:
    """
    Render a description as safe HTML.

    Markup is escaped, line breaks become <br>. None renders as an empty string.

    Example:
        >>> render_description("<b>Hot</b>\\nsoup")
        '&lt;b&gt;Hot&lt;/b&gt;<br>soup'
    """
    if not text:
        return ""
    lines = text.replace("\r\n", "\n").split("\n")
    return "<br>".join(html.escape(line) for line in lines)


def build_recipe_card(recipe: Recipe) -> RecipeCard:
    thumbnail_url = recipe.photo.thumbnail_url if recipe.photo is not None else None
    return RecipeCard(
        recipe_id=recipe.id,
        title=recipe.title,
        description_html=render_description(recipe.description),
        thumbnail_url=thumbnail_url or PLACEHOLDER_IMAGE_URL,
        author_name=recipe.author_name or UNKNOWN_AUTHOR,
    )


def build_recipe_cards(recipes: Iterable[Recipe]) -> List[RecipeCard]:
    return [build_recipe_card(recipe) for recipe in recipes]


def chunk_rows(cards: List[RecipeCard], per_row: int = CARDS_PER_ROW) -> List[List[RecipeCard]]:
    """Split cards into grid rows of at most `per_row` cards."""
    if per_row < 1:
        raise ValueError("per_row must be at least 1")
    return [cards[i:i + per_row] for i in range(0, len(cards), per_row)]
