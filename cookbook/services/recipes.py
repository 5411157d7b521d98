"""Service helpers for recipe creation, updates and owner-only deletion."""

import logging

from django.db import transaction

from cookbook.db_accessor import translate_db_errors
from cookbook.models import Ingredient, Recipe, RecipeStep
from cookbook.repos.recipe_repo import RecipeRepo

logger = logging.getLogger(__name__)

RECIPE_FIELDS = ("title", "description", "image_url", "prep_time", "difficulty")


class RecipeService:
    """Encapsulate the recipe lifecycle: create, edit, delete by owner."""

    def __init__(self, recipe_repo: RecipeRepo | None = None) -> None:
        self.recipe_repo = recipe_repo or RecipeRepo()

    def create_from_form(self, form, user):
        """Create and return a recipe (with ingredients and steps) from a valid RecipeForm."""
        return self.create(
            user,
            form.recipe_fields(),
            ingredients=form.parse_ingredients(),
            steps=form.parse_steps(),
        )

    def update_from_form(self, recipe, form):
        """Apply a valid RecipeForm to an existing recipe."""
        return self.update(
            recipe,
            form.recipe_fields(),
            ingredients=form.parse_ingredients(),
            steps=form.parse_steps(),
        )

    def create(self, author, fields, *, ingredients=(), steps=()):
        """Insert a recipe owned by author, then its ordered relations."""
        with translate_db_errors(), transaction.atomic():
            recipe = Recipe.objects.create(author=author, **self._clean_fields(fields))
            self.persist_relations(recipe, ingredients, steps)
        logger.info("User %s created recipe %s", author.pk, recipe.pk)
        return recipe

    def update(self, recipe, fields, *, ingredients=None, steps=None):
        """Update recipe columns; relations are replaced only when given."""
        for name, value in self._clean_fields(fields).items():
            setattr(recipe, name, value)
        with translate_db_errors(), transaction.atomic():
            recipe.save()
            self.persist_relations(recipe, ingredients, steps)
        logger.info("Recipe %s updated", recipe.pk)
        return recipe

    def persist_relations(self, recipe, ingredients=None, steps=None):
        """Replace ingredient and step rows, numbering positions from 1."""
        if ingredients is not None:
            Ingredient.objects.filter(recipe=recipe).delete()
            for position, item in enumerate(ingredients, start=1):
                Ingredient.objects.create(
                    recipe=recipe,
                    position=position,
                    name=item["name"],
                    quantity=item.get("quantity"),
                    unit=item.get("unit") or None,
                )
        if steps is not None:
            RecipeStep.objects.filter(recipe=recipe).delete()
            for position, description in enumerate(steps, start=1):
                RecipeStep.objects.create(recipe=recipe, position=position, description=description)

    def delete_for_owner(self, recipe_id, owner_id) -> bool:
        """Hard-delete the recipe if owner_id authored it; False otherwise."""
        deleted = self.recipe_repo.delete_owned(recipe_id, owner_id)
        if deleted:
            logger.info("User %s deleted recipe %s", owner_id, recipe_id)
        return bool(deleted)

    def _clean_fields(self, fields):
        cleaned = {name: fields[name] for name in RECIPE_FIELDS if name in fields}
        if "image_url" in cleaned:
            cleaned["image_url"] = (cleaned["image_url"] or "").strip() or None
        if "description" in cleaned:
            cleaned["description"] = cleaned["description"] or ""
        if "difficulty" in cleaned:
            cleaned["difficulty"] = (cleaned["difficulty"] or "").strip() or Recipe.DIFFICULTY_EASY
        return cleaned
