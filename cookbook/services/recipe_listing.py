"""Turn recipe rows into view-ready summaries for cards and lists."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from django.conf import settings

from .ratings import EMPTY_AGGREGATE, Aggregate, format_rating


@dataclass(frozen=True)
class RecipeSummary:
    """Everything a recipe card shows."""

    id: Any
    title: str
    image_url: str
    prep_time_display: str
    difficulty: str
    author_name: str
    rating: float
    ratings_count: int

    @property
    def rating_display(self) -> str:
        return format_rating(self.rating)


def format_prep_time(minutes: Optional[int]) -> str:
    """Render a preparation time such as '25 min'."""
    if minutes is None:
        return ""
    return f"{minutes} min"


class RecipeListComposer:
    """Join recipes with author names and rating aggregates.

    The composer never reorders: callers decide sorting and filtering and
    the output follows the input sequence.
    """

    def __init__(self, *, image_placeholder: Optional[str] = None, author_placeholder: Optional[str] = None):
        self.image_placeholder = image_placeholder or settings.RECIPE_PLACEHOLDER_IMAGE
        self.author_placeholder = author_placeholder or settings.AUTHOR_PLACEHOLDER_NAME

    def compose(
        self,
        recipes: Iterable[Any],
        display_names: Mapping[int, str],
        aggregates: Mapping[Any, Aggregate],
    ) -> List[RecipeSummary]:
        """Return one summary per recipe, in input order."""
        return [
            self.summarize(
                recipe,
                display_names.get(recipe.author_id),
                aggregates.get(recipe.id, EMPTY_AGGREGATE),
            )
            for recipe in recipes
        ]

    def summarize(self, recipe: Any, author_name: Optional[str], aggregate: Optional[Aggregate]) -> RecipeSummary:
        """Build a single summary, substituting fallbacks for missing values."""
        aggregate = aggregate or EMPTY_AGGREGATE
        return RecipeSummary(
            id=recipe.id,
            title=recipe.title,
            image_url=(getattr(recipe, "image_url", None) or "").strip() or self.image_placeholder,
            prep_time_display=format_prep_time(getattr(recipe, "prep_time", None)),
            difficulty=getattr(recipe, "difficulty", "") or "",
            author_name=(author_name or "").strip() or self.author_placeholder,
            rating=aggregate.average,
            ratings_count=aggregate.count,
        )
