"""Management command to seed the database with sample users, recipes and ratings."""

import re
from decimal import Decimal
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from faker import Faker

from cookbook.models import Ingredient, Rating, Recipe, RecipeStep, User
from cookbook.services.profile import ProfileService
from .seed_data import INGREDIENT_POOL, dish_names, step_phrases, user_fixtures

DIFFICULTIES = [value for value, _ in Recipe.DIFFICULTY_CHOICES]


class Command(BaseCommand):
    """Management command to seed the database with sample users/recipes/ratings."""
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=30, help="Total number of users to reach.")
        parser.add_argument("--recipes-per-user", type=int, default=2)
        parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable data.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.rng = self.faker.random
        self.profiles = ProfileService()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        if options.get("seed") is not None:
            Faker.seed(options["seed"])
        self.create_users(options["users"])
        self.seed_recipes(per_user=options["recipes_per_user"])
        self.seed_ratings()
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, total):
        """Create fixture users, then random ones until total is reached."""
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < total and attempts < total * 5:
            attempts += 1
            self.try_create_user(self._random_user())

    def _random_user(self):
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        suffix = self.rng.randint(10, 9999)
        username = re.sub(r"\W", "", f"{first_name}{last_name}{suffix}".lower())[:30]
        return {
            "username": username,
            "email": f"{username}@example.org",
            "display_name": f"{first_name} {last_name}" if self.rng.random() > 0.1 else "",
        }

    def try_create_user(self, data):
        """Create a user and profile; duplicates are skipped."""
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    data["username"],
                    email=data["email"],
                    password=self.DEFAULT_PASSWORD,
                )
                self.profiles.update(user, username=data.get("display_name"))
        except IntegrityError:
            return None
        return user

    def seed_recipes(self, per_user=2):
        """Give every user without recipes a few sample ones."""
        for user in User.objects.filter(recipes__isnull=True).order_by("id"):
            for _ in range(per_user):
                self._create_recipe(user)

    @transaction.atomic
    def _create_recipe(self, author):
        recipe = Recipe.objects.create(
            author=author,
            title=self.rng.choice(dish_names),
            description=self.faker.paragraph(nb_sentences=3)[:4000],
            image_url=None,
            prep_time=self.rng.choice([5, 8, 15, 20, 25, 30, 45, 60, 90]),
            difficulty=self.rng.choice(DIFFICULTIES),
        )
        for position, (name, quantity, unit) in enumerate(self.rng.sample(INGREDIENT_POOL, self.rng.randint(3, 7)), start=1):
            Ingredient.objects.create(
                recipe=recipe,
                position=position,
                name=name,
                quantity=Decimal(quantity) if quantity else None,
                unit=unit or None,
            )
        steps = self.rng.sample(step_phrases, self.rng.randint(3, 6))
        for position, description in enumerate(steps, start=1):
            RecipeStep.objects.create(recipe=recipe, position=position, description=description)
        return recipe

    def seed_ratings(self, max_ratings_per_recipe=8):
        """Rate recipes by other users only, at most once per (recipe, user)."""
        user_ids = list(User.objects.order_by("id").values_list("id", flat=True))
        rows = []
        for recipe_id, author_id in Recipe.objects.order_by("author_id", "created_at").values_list("id", "author_id"):
            raters = [uid for uid in user_ids if uid != author_id]
            for rater_id in self.rng.sample(raters, min(len(raters), self.rng.randint(0, max_ratings_per_recipe))):
                rows.append(Rating(recipe_id=recipe_id, user_id=rater_id, rating=self.rng.randint(1, 5)))
        Rating.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
