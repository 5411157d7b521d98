import json
import uuid
from urllib.parse import urlencode

from django.contrib.messages import get_messages
from django.urls import reverse

from cookbook.models import Rating
from cookbook.tests.helpers import make_rating, make_user
from cookbook.tests.views.base import RecipeViewTestCase, add_session_and_messages
from cookbook.views.rating_views import rate_recipe


class RateRecipeViewTests(RecipeViewTestCase):
    __test__ = True

    def setUp(self):
        super().setUp()
        self.url = reverse("rate_recipe", kwargs={"recipe_id": self.recipe.id})
        self.detail_url = reverse("recipe_detail", kwargs={"recipe_id": self.recipe.id})

    def _messages(self, response):
        return [str(m) for m in get_messages(response.wsgi_request)]

    def test_get_not_allowed(self):
        self.assertEqual(self.client.get(self.url).status_code, 405)

    def test_rating_is_stored(self):
        self.client.login(username="user_b", password="Password123")
        response = self.client.post(self.url, {"rating": "4"})
        self.assertRedirects(response, self.detail_url)
        self.assertEqual(Rating.objects.get().rating, 4)
        self.assertIn("Thanks for rating this recipe!", self._messages(response))

    def test_second_rating_is_rejected(self):
        make_rating(self.recipe, self.other, 2)
        self.client.login(username="user_b", password="Password123")
        response = self.client.post(self.url, {"rating": "5"})
        self.assertRedirects(response, self.detail_url)
        self.assertEqual(Rating.objects.get().rating, 2)
        self.assertIn("You have already rated this recipe.", self._messages(response))

    def test_owner_cannot_rate(self):
        self.client.login(username="user_a", password="Password123")
        response = self.client.post(self.url, {"rating": "5"})
        self.assertRedirects(response, self.detail_url)
        self.assertFalse(Rating.objects.exists())
        self.assertIn("You cannot rate your own recipe.", self._messages(response))

    def test_anonymous_is_sent_to_log_in(self):
        response = self.client.post(self.url, {"rating": "5"})
        expected = f"{reverse('log_in')}?{urlencode({'next': self.detail_url})}"
        self.assertRedirects(response, expected)
        self.assertFalse(Rating.objects.exists())

    def test_invalid_value(self):
        self.client.login(username="user_b", password="Password123")
        response = self.client.post(self.url, {"rating": "9"})
        self.assertRedirects(response, self.detail_url)
        self.assertFalse(Rating.objects.exists())

    def test_unknown_recipe_goes_home(self):
        self.client.login(username="user_b", password="Password123")
        url = reverse("rate_recipe", kwargs={"recipe_id": uuid.uuid4()})
        response = self.client.post(url, {"rating": "3"})
        self.assertRedirects(response, reverse("home"))


class RateRecipeAjaxTests(RecipeViewTestCase):
    __test__ = True

    def setUp(self):
        super().setUp()
        self.url = reverse("rate_recipe", kwargs={"recipe_id": self.recipe.id})

    def _post(self, user, value):
        request = self.factory.post(
            self.url,
            {"rating": value},
            HTTP_X_REQUESTED_WITH="XMLHttpRequest",
        )
        add_session_and_messages(request, user)
        response = rate_recipe(request, recipe_id=self.recipe.id)
        return response, json.loads(response.content)

    def test_success_returns_new_aggregate(self):
        third = make_user("user_c")
        make_rating(self.recipe, third, 2)
        response, body = self._post(self.other, "5")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(body["rating"], 5)
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["average"], 3.5)
        self.assertEqual(body["average_display"], "3.5")
        self.assertFalse(body["can_rate"])

    def test_duplicate_is_conflict(self):
        make_rating(self.recipe, self.other, 3)
        response, body = self._post(self.other, "4")
        self.assertEqual(response.status_code, 409)
        self.assertEqual(body["code"], "DuplicateRating")
        self.assertFalse(body["retryable"])

    def test_self_rating_is_forbidden(self):
        response, body = self._post(self.user, "4")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(body["code"], "SelfRatingForbidden")

    def test_anonymous_is_unauthorized(self):
        response, body = self._post(None, "4")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(body["error"], "Please log in to rate recipes.")

    def test_invalid_value_is_bad_request(self):
        response, body = self._post(self.other, "0")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(body["code"], "ValidationError")
        self.assertFalse(Rating.objects.exists())
