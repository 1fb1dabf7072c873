"""
Tests for the recipe creation form.

This module tests:
- Title is required; description and the rest are optional
- The payload carries the author id and a forced published status
- The form resets and clears its submitting flag whatever the outcome
"""

from unittest.mock import Mock

import pytest

from recipes_client.forms import RecipeForm, submit_recipe_form
from recipes_client.models import User

ADA = User(id=1, name="Ada", email="ada@example.com")


class TestRecipeForm:
    """Test cases for form state."""

    def test_defaults_empty(self):
        form = RecipeForm()
        assert form.values() == {"title": "", "description": "", "ingredients": "", "instructions": ""}
        assert form.is_submitting is False
        assert not form.is_valid

    @pytest.mark.parametrize("title, valid", [("Soup", True), ("", False), ("   ", False)])
    def test_title_required(self, title, valid):
        assert RecipeForm(title=title).is_valid is valid

    def test_reset_clears_fields(self):
        form = RecipeForm(title="Soup", description="Hot", ingredients="Water", instructions="Boil")
        form.reset()
        assert form.values() == RecipeForm().values()


class TestSubmitRecipeForm:
    """Test cases for submitting the form."""

    def test_title_only_submits(self):
        """Test that a title with an empty description is submitted."""
        on_create = Mock()
        form = RecipeForm(title="Soup")

        assert submit_recipe_form(form, ADA, on_create) is True

        on_create.assert_called_once_with({
            "title": "Soup",
            "description": "",
            "ingredients": "",
            "instructions": "",
            "author": 1,
            "status": "published",
        })

    def test_missing_title_prevented(self):
        """Test that a blank title never reaches the create callback."""
        on_create = Mock()
        form = RecipeForm(description="No title here")

        assert submit_recipe_form(form, ADA, on_create) is False

        on_create.assert_not_called()
        assert form.description == "No title here"

    def test_resets_after_success(self):
        form = RecipeForm(title="Soup", description="Hot")
        submit_recipe_form(form, ADA, Mock())
        assert form.title == ""
        assert form.description == ""
        assert form.is_submitting is False

    def test_marks_submitting_during_callback(self):
        """Test that the submitting flag is set while the callback runs."""
        form = RecipeForm(title="Soup")
        seen = []
        submit_recipe_form(form, ADA, lambda payload: seen.append(form.is_submitting))
        assert seen == [True]

    def test_resets_when_callback_reports_failure(self):
        """Test that a failed create (None result) still resets the form."""
        form = RecipeForm(title="Soup")
        assert submit_recipe_form(form, ADA, Mock(return_value=None)) is True
        assert form.title == ""

    def test_resets_when_callback_raises(self):
        form = RecipeForm(title="Soup")
        with pytest.raises(RuntimeError):
            submit_recipe_form(form, ADA, Mock(side_effect=RuntimeError("boom")))
        assert form.title == ""
        assert form.is_submitting is False
