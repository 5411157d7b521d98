from django import forms

from cookbook.models.rating import RATING_MAX, RATING_MIN


class RatingForm(forms.Form):
    """Star rating posted from the recipe detail page."""
    rating = forms.TypedChoiceField(
        choices=[(value, str(value)) for value in range(RATING_MIN, RATING_MAX + 1)],
        coerce=int,
        widget=forms.RadioSelect,
        error_messages={
            "required": "Pick a number of stars first.",
            "invalid_choice": f"Rating must be a whole number from {RATING_MIN} to {RATING_MAX}.",
        },
    )
