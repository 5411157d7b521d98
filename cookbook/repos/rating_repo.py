"""Rating store: reads and writes individual rating rows."""

import logging
from typing import Any, Iterable, List, Optional

from django.db import IntegrityError, transaction

from cookbook.db_accessor import DB_Accessor, translate_db_errors
from cookbook.errors import (
    DuplicateRating,
    RecipeNotFound,
    SelfRatingForbidden,
    UnauthenticatedError,
    ValidationError,
)
from cookbook.models.rating import RATING_MAX, RATING_MIN, Rating
from cookbook.models.recipe import Recipe
from cookbook.utils.uuid import parse_uuid

logger = logging.getLogger(__name__)


def validate_rating_value(value: Any) -> int:
    """Return value when it is an integer in 1..5, else raise ValidationError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Rating must be a whole number from {RATING_MIN} to {RATING_MAX}.")
    if not RATING_MIN <= value <= RATING_MAX:
        raise ValidationError(f"Rating must be a whole number from {RATING_MIN} to {RATING_MAX}.")
    return value


class RatingRepo(DB_Accessor):
    """Repository for Rating rows; creation is insert-only."""
    def __init__(self) -> None:
        """Initialise with the Rating model."""
        super().__init__(Rating)

    def submit_rating(self, recipe_id, rater_user_id: Optional[int], value: Any) -> Rating:
        """Create the rater's one and only rating for a recipe.

        Raises ValidationError, UnauthenticatedError, SelfRatingForbidden,
        DuplicateRating, RecipeNotFound or TransportError. Never overwrites an
        existing rating.
        """
        value = validate_rating_value(value)
        if rater_user_id is None:
            raise UnauthenticatedError("Please log in to rate recipes.")
        recipe_uuid = parse_uuid(recipe_id)
        if recipe_uuid is None:
            raise ValidationError("Unknown recipe reference.")

        owner_id = self._recipe_owner_id(recipe_uuid)
        if owner_id == rater_user_id:
            raise SelfRatingForbidden()
        if self.exists(recipe_id=recipe_uuid, user_id=rater_user_id):
            raise DuplicateRating()

        try:
            with translate_db_errors(), transaction.atomic():
                rating = Rating.objects.create(
                    recipe_id=recipe_uuid,
                    user_id=rater_user_id,
                    rating=value,
                )
        except IntegrityError as exc:
            # Lost a race with another submission from the same user.
            logger.info("Duplicate rating for recipe %s by user %s", recipe_uuid, rater_user_id)
            raise DuplicateRating() from exc
        logger.info("User %s rated recipe %s with %s", rater_user_id, recipe_uuid, value)
        return rating

    def get_user_rating(self, recipe_id, user_id: Optional[int]) -> Optional[int]:
        """Return the user's rating value for the recipe, or None."""
        if user_id is None:
            return None
        recipe_uuid = parse_uuid(recipe_id)
        if recipe_uuid is None:
            return None
        row = self.find(recipe_id=recipe_uuid, user_id=user_id)
        return row.rating if row else None

    def list_ratings(self, recipe_id) -> List[Rating]:
        """Return every rating row for a recipe (empty list if none)."""
        recipe_uuid = parse_uuid(recipe_id)
        if recipe_uuid is None:
            return []
        return self.list(filters={"recipe_id": recipe_uuid}, order_by=("created_at", "id"))

    def list_for_recipes(self, recipe_ids: Iterable) -> List[Rating]:
        """Return rating rows for a batch of recipes in one query."""
        ids = [rid for rid in recipe_ids]
        if not ids:
            return []
        return self.list(filters={"recipe_id__in": ids})

    def _recipe_owner_id(self, recipe_uuid) -> int:
        with translate_db_errors():
            owner_id = (
                Recipe.objects.filter(id=recipe_uuid)
                .values_list("author_id", flat=True)
                .first()
            )
        if owner_id is None:
            raise RecipeNotFound()
        return owner_id
