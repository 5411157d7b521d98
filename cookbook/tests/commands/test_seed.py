from io import StringIO

from django.core.management import call_command
from django.db.models import F
from django.test import TestCase

from cookbook.models import Profile, Rating, Recipe, User
from cookbook.tests.helpers import make_user


class SeedCommandTests(TestCase):
    def _seed(self, **options):
        out = StringIO()
        call_command("seed", stdout=out, seed=1, **options)
        return out.getvalue()

    def test_creates_users_recipes_and_ratings(self):
        output = self._seed(users=6, recipes_per_user=1)
        self.assertIn("Seeding complete", output)
        self.assertEqual(User.objects.count(), 6)
        self.assertEqual(Profile.objects.count(), 6)
        self.assertEqual(Recipe.objects.count(), 6)
        for recipe in Recipe.objects.all():
            self.assertGreaterEqual(recipe.ingredients.count(), 3)
            self.assertGreaterEqual(recipe.steps.count(), 3)

    def test_fixture_users_get_display_names(self):
        self._seed(users=3, recipes_per_user=0)
        self.assertEqual(User.objects.get(username="johndoe").profile.display_name, "John Doe")

    def test_nobody_rates_their_own_recipe(self):
        self._seed(users=8, recipes_per_user=2)
        self.assertFalse(Rating.objects.filter(user_id=F("recipe__author_id")).exists())

    def test_running_twice_does_not_duplicate_fixtures(self):
        self._seed(users=3, recipes_per_user=1)
        self._seed(users=3, recipes_per_user=1)
        self.assertEqual(User.objects.count(), 3)
        self.assertEqual(Recipe.objects.count(), 3)

    def test_same_seed_gives_same_data(self):
        self._seed(users=6, recipes_per_user=1)
        first = self._snapshot()
        call_command("unseed", stdout=StringIO())
        self._seed(users=6, recipes_per_user=1)
        self.assertEqual(self._snapshot(), first)

    def _snapshot(self):
        recipes = sorted(
            (recipe.author.username, recipe.title, recipe.prep_time, recipe.difficulty,
             tuple(recipe.ingredients.values_list("name", flat=True)))
            for recipe in Recipe.objects.select_related("author")
        )
        ratings = sorted(
            Rating.objects.values_list("recipe__author__username", "user__username", "rating")
        )
        return recipes, ratings


class UnseedCommandTests(TestCase):
    def test_removes_non_staff_users_and_their_content(self):
        admin = make_user("admin", is_staff=True)
        call_command("seed", users=4, recipes_per_user=1, seed=2, stdout=StringIO())
        out = StringIO()
        call_command("unseed", stdout=out)
        self.assertEqual(list(User.objects.all()), [admin])
        self.assertEqual(Recipe.objects.filter(author=admin).count(), Recipe.objects.count())
        self.assertIn("Deleted 3 non-staff users", out.getvalue())
