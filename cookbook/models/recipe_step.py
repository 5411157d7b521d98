"""Ordered instruction steps of a recipe."""

from django.db import models

from .recipe import Recipe


class RecipeStep(models.Model):
    """One instruction line; positions number the steps from 1 within a recipe."""

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='steps',
    )
    position = models.PositiveIntegerField()
    description = models.TextField(max_length=1000)

    class Meta:
        db_table = "recipe_step"
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(
                fields=['recipe', 'position'],
                name='recipe_step_unique_position',
            ),
            models.CheckConstraint(
                condition=models.Q(position__gt=0),
                name="recipe_step_position_gt_0",
            ),
        ]

    def __str__(self):
        text = self.description if len(self.description) <= 40 else f"{self.description[:40]}..."
        return f"Step {self.position}: {text}"
