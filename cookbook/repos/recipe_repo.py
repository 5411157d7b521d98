"""Repository helpers for fetching and mutating recipes."""

from typing import Any, List, Optional

from django.db.models import Avg, Count, F, Q, QuerySet

from cookbook.db_accessor import DB_Accessor
from cookbook.models.ingredient import Ingredient
from cookbook.models.recipe import Recipe
from cookbook.utils.uuid import parse_uuid

# Cooking-time buckets offered by the search sidebar, in minutes (inclusive).
TIME_RANGES = {
    "5-10": (5, 10),
    "11-30": (11, 30),
    "31-60": (31, 60),
    "60+": (61, None),
}

NEWEST_FIRST = ("-created_at", "-id")


class RecipeRepo(DB_Accessor):
    """Repository for Recipe queries (newest, by owner, top rated, search)."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def get_by_id(self, recipe_id) -> Optional[Recipe]:
        """Return the recipe with its author, or None for unknown ids."""
        recipe_uuid = parse_uuid(recipe_id)
        if recipe_uuid is None:
            return None
        rows = self.fetch(self.base_queryset().filter(id=recipe_uuid))
        return rows[0] if rows else None

    def base_queryset(self) -> QuerySet:
        """Recipes with their author joined in."""
        return self.model.objects.select_related("author")

    def apply_filters(
        self,
        qs: QuerySet,
        *,
        query: Optional[str] = None,
        ingredient: Optional[str] = None,
        difficulty: Optional[str] = None,
        time_range: Optional[str] = None,
    ) -> QuerySet:
        """Narrow a recipe queryset with the search sidebar filters."""
        if query:
            qs = qs.filter(Q(title__icontains=query) | Q(description__icontains=query))
        if ingredient:
            matching = Ingredient.objects.filter(name__icontains=ingredient).values("recipe_id")
            qs = qs.filter(id__in=matching)
        if difficulty:
            qs = qs.filter(difficulty__iexact=difficulty)
        bounds = TIME_RANGES.get(time_range or "")
        if bounds:
            low, high = bounds
            qs = qs.filter(prep_time__gte=low)
            if high is not None:
                qs = qs.filter(prep_time__lte=high)
        return qs

    def list_newest(
        self,
        *,
        author_id: Optional[int] = None,
        exclude_author_id: Optional[int] = None,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> List[Recipe]:
        """Return recipes newest first, optionally restricted by author."""
        qs = self.apply_filters(self.base_queryset(), **filters)
        if author_id is not None:
            qs = qs.filter(author_id=author_id)
        if exclude_author_id is not None:
            qs = qs.exclude(author_id=exclude_author_id)
        qs = qs.order_by(*NEWEST_FIRST)
        return self.fetch(self._apply_slice(qs, limit=limit))

    def list_top_rated(self, *, limit: Optional[int] = None, **filters: Any) -> List[Recipe]:
        """Return recipes ordered by average rating, computed by the database.

        Unrated recipes come last; ties go to the recipe with more ratings,
        then the newer one.
        """
        qs = self.apply_filters(self.base_queryset(), **filters)
        qs = qs.annotate(
            average_rating=Avg("ratings__rating"),
            ratings_count=Count("ratings", distinct=True),
        ).order_by(
            F("average_rating").desc(nulls_last=True),
            "-ratings_count",
            *NEWEST_FIRST,
        )
        return self.fetch(self._apply_slice(qs, limit=limit))

    def delete_owned(self, recipe_id, owner_id: int) -> int:
        """Hard-delete a recipe only when owner_id authored it."""
        return self.delete(id=recipe_id, author_id=owner_id)

