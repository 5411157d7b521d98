from unittest.mock import MagicMock, patch

from django.core import mail
from django.test import TestCase
from django.urls import reverse

from cookbook.tests.helpers import make_user
from cookbook.views.password_reset_views import PasswordResetRequestView


class PasswordResetRequestViewTests(TestCase):
    def setUp(self):
        self.url = reverse("password_reset")
        self.user = make_user("johndoe")

    def test_get(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "auth/password_reset_request.html")

    def test_known_email_sends_link(self):
        generator = MagicMock(return_value="https://example.org/reset?code=abc")
        with patch.object(PasswordResetRequestView, "reset_link_generator", generator):
            response = self.client.post(self.url, {"email": "JohnDoe@example.org"})
        self.assertRedirects(response, reverse("password_reset_done"))
        generator.assert_called_once_with("johndoe@example.org")
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].subject, "Reset your recipebox password")
        self.assertIn("https://example.org/reset?code=abc", mail.outbox[0].body)

    def test_unknown_email_gives_same_response(self):
        generator = MagicMock()
        with patch.object(PasswordResetRequestView, "reset_link_generator", generator):
            response = self.client.post(self.url, {"email": "nobody@example.org"})
        self.assertRedirects(response, reverse("password_reset_done"))
        generator.assert_not_called()
        self.assertEqual(len(mail.outbox), 0)

    def test_no_link_means_no_mail(self):
        with patch.object(PasswordResetRequestView, "reset_link_generator", MagicMock(return_value=None)):
            response = self.client.post(self.url, {"email": "johndoe@example.org"})
        self.assertRedirects(response, reverse("password_reset_done"))
        self.assertEqual(len(mail.outbox), 0)

    def test_done_page(self):
        response = self.client.get(reverse("password_reset_done"))
        self.assertTemplateUsed(response, "auth/password_reset_done.html")
