from django.core.validators import MinValueValidator
from django.db import models

from cookbook.utils.uuid import uuid7_or_4
from .user import User

"""
Recipe model

A recipe is a user-authored dish entry:
- `author` is the owning user; only the author may edit or delete it.
- `image_url` is an optional link to a photo; cards fall back to a placeholder.
- `prep_time` is the preparation time in whole minutes (always positive).
- `difficulty` is a free-form label. The form offers the standard levels
  below but users may type their own.
- Ingredients and steps live in their own ordered tables (`ingredients`,
  `steps` related names).
- Ratings reference the recipe and are removed with it (hard delete).
"""


class Recipe(models.Model):
    DIFFICULTY_EASY = "Easy"
    DIFFICULTY_MEDIUM = "Medium"
    DIFFICULTY_HARD = "Hard"
    DIFFICULTY_EXTREME = "Extreme Hard"

    DIFFICULTY_CHOICES = [
        (DIFFICULTY_EASY, "Easy"),
        (DIFFICULTY_MEDIUM, "Medium"),
        (DIFFICULTY_HARD, "Hard"),
        (DIFFICULTY_EXTREME, "Extreme Hard"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    author = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='user_id',
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000)
    image_url = models.CharField(max_length=500, blank=True, null=True)
    prep_time = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    difficulty = models.CharField(max_length=50, default=DIFFICULTY_EASY)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipes'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(prep_time__gt=0),
                name='recipe_prep_time_gt_0',
            ),
        ]

    def __str__(self):
        return self.title

    def is_owned_by(self, user_id):
        return user_id is not None and self.author_id == user_id
