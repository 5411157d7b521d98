from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone

from cookbook.models import Ingredient, Rating, Recipe, RecipeStep, User


def reverse_with_next(url_name, next_url):
    """Extended version of reverse to generate URLs with redirects"""
    url = reverse(url_name)
    url += f"?next={next_url}"
    return url


def make_user(username="johndoe", **kwargs):
    """Create a user; the post_save signal gives them an empty profile."""
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")
    display_name = kwargs.pop("display_name", None)
    user = User.objects.create_user(username=username, email=email, password=password, **kwargs)
    if display_name is not None:
        user.profile.username = display_name
        user.profile.save()
    return user


def make_recipe(
    *,
    author=None,
    title="Tomato soup",
    description="A warming soup.",
    prep_time=20,
    difficulty=Recipe.DIFFICULTY_EASY,
    image_url=None,
    ingredients=(("tomatoes", "4", ""), ("salt", None, "")),
    steps=("Chop the tomatoes.", "Simmer for 15 minutes."),
    minutes_ago=None,
):
    """
    Create and return a recipe with ordered ingredients and steps.
    minutes_ago backdates created_at so ordering tests are deterministic.
    """
    if author is None:
        author = make_user()
    recipe = Recipe.objects.create(
        author=author,
        title=title,
        description=description,
        prep_time=prep_time,
        difficulty=difficulty,
        image_url=image_url,
    )
    for position, (name, quantity, unit) in enumerate(ingredients, start=1):
        Ingredient.objects.create(
            recipe=recipe,
            position=position,
            name=name,
            quantity=Decimal(quantity) if quantity else None,
            unit=unit or None,
        )
    for position, description in enumerate(steps, start=1):
        RecipeStep.objects.create(recipe=recipe, position=position, description=description)
    if minutes_ago is not None:
        created_at = timezone.now() - timedelta(minutes=minutes_ago)
        Recipe.objects.filter(pk=recipe.pk).update(created_at=created_at)
        recipe.refresh_from_db()
    return recipe


def make_rating(recipe, user, value):
    return Rating.objects.create(recipe=recipe, user=user, rating=value)


class LogInTester:
    """Class support login in tests."""

    def _is_logged_in(self):
        """Returns True if a user is logged in.  False otherwise."""
        return '_auth_user_id' in self.client.session.keys()
