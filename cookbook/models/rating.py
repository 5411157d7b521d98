"""Model representing one user's 1-5 score for a recipe."""

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from .user import User
from .recipe import Recipe

RATING_MIN = 1
RATING_MAX = 5


class Rating(models.Model):
    """A user's rating of a recipe. Created once, never updated."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ratings'
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='ratings'
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)]
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """One rating per user/recipe pair, value within 1..5."""
        db_table = "ratings"
        constraints = [
            models.UniqueConstraint(
                fields=['recipe', 'user'],
                name='rating_unique_recipe_user',
            ),
            models.CheckConstraint(
                condition=models.Q(rating__gte=RATING_MIN, rating__lte=RATING_MAX),
                name='rating_value_between_1_and_5',
            ),
        ]

    @property
    def value(self):
        return self.rating

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.recipe_id}: {self.rating}"
