"""
Recipe creation form state for the dashboard.

The form keeps one local slice (title, description, ingredients, instructions) plus a
submitting flag. Submission validates the required title, hands the payload to the
shell's create callback and resets the form whatever the outcome; failure feedback is
the shell's job.
"""

from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict

from recipes_client.models import STATUS_PUBLISHED, User

FORM_FIELDS = ("title", "description", "ingredients", "instructions")


@dataclass
class RecipeForm:
    title: str = ""
    description: str = ""
    ingredients: str = ""
    instructions: str = ""
    is_submitting: bool = False

    @property
    def is_valid(self) -> bool:
        """Title is the only required field."""
        return bool(self.title and self.title.strip())

    def values(self) -> Dict[str, str]:
        data = asdict(self)
        return {name: data[name] for name in FORM_FIELDS}

    def reset(self) -> None:
        for name in FORM_FIELDS:
            setattr(self, name, "")


def submit_recipe_form(
    form: RecipeForm,
    user: User,
    on_create: Callable[[Dict[str, Any]], Any],
) -> bool:
    """
    Submit the form through the create callback.

    Args:
        form: Form state, reset in place after the callback returns or raises
        user: Logged-in user, recorded as the author
        on_create: Shell callback receiving the recipe payload

    Returns:
        False if the submission was prevented (blank title), True once the callback ran.
    """
    if not form.is_valid:
        return False

    form.is_submitting = True
    try:
        on_create({**form.values(), "author": user.id, "status": STATUS_PUBLISHED})
    finally:
        form.reset()
        form.is_submitting = False
    return True
