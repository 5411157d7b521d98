from unittest.mock import MagicMock, patch

from django.test import TestCase
from django.urls import reverse

from cookbook.errors import TransportError
from cookbook.services.feed import RecipeListing
from cookbook.tests.helpers import make_rating, make_recipe, make_user


class HomeViewTestCase(TestCase):
    def setUp(self):
        self.url = reverse("home")
        self.alice = make_user("alice", display_name="Alice")
        self.bob = make_user("bob", display_name="Bob")
        self.alice_recipe = make_recipe(author=self.alice, title="Alice curry", minutes_ago=20)
        self.bob_recipe = make_recipe(author=self.bob, title="Bob risotto", prep_time=45, minutes_ago=10)
        make_rating(self.alice_recipe, self.bob, 5)

    def _titles(self, response):
        return [summary.title for summary in response.context["recipes"]]

    def test_home_url(self):
        self.assertEqual(self.url, "/")

    def test_anonymous_sees_all_recipes_newest_first(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "home.html")
        self.assertEqual(self._titles(response), ["Bob risotto", "Alice curry"])
        self.assertEqual(response.context["active_tab"], "all")
        self.assertContains(response, "Alice curry")

    def test_members_tab_hides_own_recipes(self):
        self.client.login(username="alice", password="Password123")
        response = self.client.get(self.url, {"tab": "members"})
        self.assertEqual(self._titles(response), ["Bob risotto"])

    def test_top_rated_tab(self):
        response = self.client.get(self.url, {"tab": "top_rated"})
        self.assertEqual(self._titles(response), ["Alice curry", "Bob risotto"])
        self.assertFalse(response.context["fallback_used"])

    def test_mine_tab_is_not_a_home_tab(self):
        self.client.login(username="alice", password="Password123")
        response = self.client.get(self.url, {"tab": "mine"})
        self.assertEqual(response.context["active_tab"], "all")
        self.assertEqual(len(response.context["recipes"]), 2)

    def test_search_filters(self):
        response = self.client.get(self.url, {"q": "curry"})
        self.assertEqual(self._titles(response), ["Alice curry"])
        self.assertTrue(response.context["has_filters"])

    def test_time_range_filter(self):
        response = self.client.get(self.url, {"time_range": "31-60"})
        self.assertEqual(self._titles(response), ["Bob risotto"])

    def test_cards_show_author_and_rating(self):
        response = self.client.get(self.url)
        card = response.context["recipes"][1]
        self.assertEqual(card.author_name, "Alice")
        self.assertEqual(card.rating_display, "5.0")
        self.assertEqual(card.ratings_count, 1)

    def test_fallback_notice(self):
        service = MagicMock()
        service.list.return_value = RecipeListing(tab="top_rated", recipes=[], fallback_used=True)
        with patch("cookbook.views.home_view.feed_service_factory", return_value=service):
            response = self.client.get(self.url, {"tab": "top_rated"})
        self.assertContains(response, "Top-rated ordering is unavailable right now")

    def test_transport_error_shows_message(self):
        service = MagicMock()
        service.list.side_effect = TransportError()
        with patch("cookbook.views.home_view.feed_service_factory", return_value=service):
            response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["recipes"], [])
        messages_list = [str(m) for m in response.context["messages"]]
        self.assertIn(TransportError.default_message, messages_list)
