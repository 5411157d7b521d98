from django import forms

from cookbook.models import Recipe
from cookbook.repos.recipe_repo import TIME_RANGES
from cookbook.services.feed import TAB_ALL, TAB_VALUES, RecipeListOptions

TIME_RANGE_CHOICES = [("", "Any")] + [(key, f"{key} mins") for key in TIME_RANGES]


class SearchForm(forms.Form):
    """Search sidebar: name, ingredient, difficulty and cooking time filters."""
    tab = forms.CharField(required=False, widget=forms.HiddenInput())
    q = forms.CharField(
        label="Recipe name",
        required=False,
        max_length=100,
        widget=forms.TextInput(attrs={"placeholder": "e.g. pad thai"}),
    )
    ingredient = forms.CharField(
        label="Ingredient",
        required=False,
        max_length=100,
        widget=forms.TextInput(attrs={"placeholder": "e.g. chicken"}),
    )
    difficulty = forms.ChoiceField(
        label="Difficulty",
        required=False,
        choices=[("", "Any")] + Recipe.DIFFICULTY_CHOICES,
    )
    time_range = forms.ChoiceField(
        label="Cooking time",
        required=False,
        choices=TIME_RANGE_CHOICES,
    )

    def to_options(self, viewer_id=None, *, default_tab=TAB_ALL):
        """Translate the query string into RecipeListOptions; invalid input is ignored."""
        data = self.cleaned_data if self.is_valid() else {}
        tab = data.get("tab") or default_tab
        return RecipeListOptions(
            tab=tab if tab in TAB_VALUES else default_tab,
            viewer_id=viewer_id,
            query=data.get("q") or None,
            ingredient=data.get("ingredient") or None,
            difficulty=data.get("difficulty") or None,
            time_range=data.get("time_range") or None,
        )

    def has_filters(self):
        data = self.cleaned_data if self.is_valid() else {}
        return any(data.get(name) for name in ("q", "ingredient", "difficulty", "time_range"))
