"""Ingredient lines of a recipe."""

from django.db import models

from .recipe import Recipe


class Ingredient(models.Model):
    """One ingredient line: optional quantity and unit, then the name."""

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ingredients',
    )
    position = models.PositiveIntegerField(default=1)
    name = models.CharField(max_length=255)
    quantity = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    unit = models.CharField(max_length=50, null=True, blank=True)

    class Meta:
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(
                fields=['recipe', 'position'],
                name='ingredient_unique_position',
            ),
            models.CheckConstraint(
                condition=models.Q(position__gt=0),
                name='ingredient_position_gt_0',
            ),
        ]

    def save(self, *args, **kwargs):
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    def as_dict(self):
        """Plain values for the detail projection; `text` is the display line."""
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit or "",
            "text": str(self),
        }

    def __str__(self):
        # normalize() drops trailing zeros; :f keeps 100 from becoming 1E+2
        parts = []
        if self.quantity is not None:
            parts.append(f"{self.quantity.normalize():f}")
        if self.unit:
            parts.append(self.unit)
        parts.append(self.name)
        return " ".join(parts)
