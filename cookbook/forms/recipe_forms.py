from decimal import Decimal, InvalidOperation
from fractions import Fraction

from django import forms

from cookbook.models import Recipe

CUSTOM_DIFFICULTY = "__custom__"

KNOWN_UNITS = {
    "g", "gram", "grams", "kg", "mg",
    "ml", "l", "litre", "litres", "liter", "liters",
    "tsp", "teaspoon", "teaspoons", "tbsp", "tablespoon", "tablespoons",
    "cup", "cups", "oz", "lb", "lbs",
    "pinch", "clove", "cloves", "slice", "slices", "piece", "pieces",
    "stick", "sticks", "can", "cans", "bunch", "head", "sprig", "sprigs",
}

MAX_INGREDIENTS = 50
MAX_QUANTITY = Decimal("100000000")
MAX_STEPS = 50


def parse_quantity(token):
    """Parse '2', '1.5', '1/2' into a Decimal (2 places); None when not a number."""
    try:
        if "/" in token:
            fraction = Fraction(token)
            value = Decimal(fraction.numerator) / Decimal(fraction.denominator)
        else:
            value = Decimal(token)
    except (InvalidOperation, ValueError, ZeroDivisionError):
        return None
    if not value.is_finite() or value <= 0 or value >= MAX_QUANTITY:
        return None
    return value.quantize(Decimal("0.01"))


def parse_ingredient_line(line):
    """Split 'qty unit name' into a dict; quantity and unit are optional.

    '2 cups Flour' -> quantity 2, unit 'cups', name 'Flour'
    '1 1/2 tsp salt' -> quantity 1.5
    'Salt' -> name only
    """
    tokens = line.split()
    quantity = parse_quantity(tokens[0]) if tokens else None
    if quantity is not None:
        tokens = tokens[1:]
        extra = parse_quantity(tokens[0]) if tokens and "/" in tokens[0] else None
        if extra is not None:
            quantity += extra
            tokens = tokens[1:]
        if quantity >= MAX_QUANTITY:
            quantity = None
            tokens = line.split()
    unit = ""
    if quantity is not None and len(tokens) > 1 and tokens[0].lower().rstrip(".") in KNOWN_UNITS:
        unit = tokens[0]
        tokens = tokens[1:]
    return {"name": " ".join(tokens), "quantity": quantity, "unit": unit}


class RecipeForm(forms.ModelForm):
    """Single form for creating and editing a recipe with its ingredients and steps."""

    field_order = [
        "title",
        "description",
        "image_url",
        "prep_time",
        "difficulty",
        "custom_difficulty",
        "ingredients_text",
        "steps_text",
    ]

    image_url = forms.URLField(
        label="Image URL",
        required=False,
        max_length=500,
        assume_scheme="https",
        help_text="Link to a photo of the dish (optional).",
    )
    difficulty = forms.ChoiceField(
        choices=Recipe.DIFFICULTY_CHOICES + [(CUSTOM_DIFFICULTY, "Other...")],
        initial=Recipe.DIFFICULTY_EASY,
    )
    custom_difficulty = forms.CharField(
        label="Your difficulty",
        required=False,
        max_length=50,
    )
    ingredients_text = forms.CharField(
        label="Ingredients",
        widget=forms.Textarea(attrs={"rows": 6, "placeholder": "Example:\n2 cups Flour\n1 tsp Salt\nFresh basil"}),
        help_text="One ingredient per line: quantity, unit, name.",
    )
    steps_text = forms.CharField(
        label="Steps",
        widget=forms.Textarea(attrs={"rows": 6}),
        help_text="One step per line.",
    )

    class Meta:
        """Model/field configuration for RecipeForm."""
        model = Recipe
        fields = ["title", "description", "image_url", "prep_time", "difficulty"]
        labels = {"prep_time": "Preparation time (minutes)"}
        widgets = {"description": forms.Textarea(attrs={"rows": 4})}

    def __init__(self, *args, **kwargs):
        """Populate text areas and the difficulty choice when editing."""
        super().__init__(*args, **kwargs)
        self.fields["prep_time"].widget.attrs["min"] = 1
        if self.instance and self.instance.pk:
            self._prefill_difficulty(self.instance)
            self._prefill_ingredients(self.instance)
            self._prefill_steps(self.instance)

    def _prefill_difficulty(self, instance):
        standard = {value for value, _ in Recipe.DIFFICULTY_CHOICES}
        if instance.difficulty and instance.difficulty not in standard:
            self.initial["difficulty"] = CUSTOM_DIFFICULTY
            self.initial["custom_difficulty"] = instance.difficulty

    def _prefill_ingredients(self, instance):
        self.initial["ingredients_text"] = "\n".join(str(ing) for ing in instance.ingredients.all())

    def _prefill_steps(self, instance):
        self.initial["steps_text"] = "\n".join(step.description for step in instance.steps.all())

    def clean_title(self):
        title = (self.cleaned_data.get("title") or "").strip()
        if not title:
            raise forms.ValidationError("Please give your recipe a title.")
        return title

    def clean_ingredients_text(self):
        lines = self._split_lines(self.cleaned_data.get("ingredients_text"))
        if not lines:
            raise forms.ValidationError("Add at least one ingredient.")
        if len(lines) > MAX_INGREDIENTS:
            raise forms.ValidationError(f"Add up to {MAX_INGREDIENTS} ingredients.")
        missing = [line for line in lines if not parse_ingredient_line(line)["name"]]
        if missing:
            raise forms.ValidationError(f"Each ingredient needs a name: {', '.join(missing)}")
        return "\n".join(lines)

    def clean_steps_text(self):
        lines = self._split_lines(self.cleaned_data.get("steps_text"))
        if not lines:
            raise forms.ValidationError("Add at least one step.")
        if len(lines) > MAX_STEPS:
            raise forms.ValidationError(f"Add up to {MAX_STEPS} steps.")
        return "\n".join(lines)

    def clean(self):
        """Resolve the 'Other...' difficulty choice into the typed value."""
        cleaned_data = super().clean()
        if cleaned_data.get("difficulty") == CUSTOM_DIFFICULTY:
            custom = (cleaned_data.get("custom_difficulty") or "").strip()
            if not custom:
                self.add_error("custom_difficulty", "Describe the difficulty or pick one from the list.")
            else:
                cleaned_data["difficulty"] = custom
        return cleaned_data

    def _split_lines(self, text):
        """Split textarea content into stripped, non-empty lines."""
        lines = [line.strip() for line in (text or "").splitlines()]
        return [line for line in lines if line]

    def recipe_fields(self):
        """Recipe column values from the validated form."""
        return {
            "title": self.cleaned_data["title"],
            "description": self.cleaned_data.get("description") or "",
            "image_url": self.cleaned_data.get("image_url") or None,
            "prep_time": self.cleaned_data["prep_time"],
            "difficulty": self.cleaned_data["difficulty"],
        }

    def parse_ingredients(self):
        """Ingredient dicts in the order they were typed."""
        return [parse_ingredient_line(line) for line in self._split_lines(self.cleaned_data.get("ingredients_text"))]

    def parse_steps(self):
        """Step descriptions in the order they were typed."""
        return self._split_lines(self.cleaned_data.get("steps_text"))
