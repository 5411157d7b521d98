from unittest.mock import MagicMock, patch

import requests
from django.test import TestCase, override_settings
from firebase_admin import auth as firebase_auth

from cookbook.firebase_auth_services import (
    SIGN_IN_URL,
    generate_password_reset_link,
    sign_in_with_email_and_password,
    verify_id_token,
)


def http_response(status_code, body):
    response = MagicMock(status_code=status_code)
    response.json.return_value = body
    return response


@override_settings(FIREBASE_API_KEY="test-key")
class SignInTests(TestCase):
    def test_no_network_unless_mocked(self):
        self.assertIsNone(sign_in_with_email_and_password("cook@example.org", "Password123"))

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_success_returns_payload(self, mock_post):
        mock_post.return_value = http_response(200, {"idToken": "token", "localId": "uid"})
        result = sign_in_with_email_and_password("cook@example.org", "Password123")
        self.assertEqual(result["idToken"], "token")
        mock_post.assert_called_once_with(
            SIGN_IN_URL,
            params={"key": "test-key"},
            json={"email": "cook@example.org", "password": "Password123", "returnSecureToken": True},
            timeout=10,
        )

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_rejected_credentials(self, mock_post):
        mock_post.return_value = http_response(400, {"error": {"message": "INVALID_LOGIN_CREDENTIALS"}})
        with self.assertLogs("cookbook.firebase_auth_services", level="WARNING") as logs:
            self.assertIsNone(sign_in_with_email_and_password("cook@example.org", "wrong"))
        self.assertIn("The email or password is incorrect.", logs.output[0])

    @patch("cookbook.firebase_auth_services.requests.post")
    def test_network_failure(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("offline")
        with self.assertLogs("cookbook.firebase_auth_services", level="WARNING"):
            self.assertIsNone(sign_in_with_email_and_password("cook@example.org", "Password123"))

    @override_settings(FIREBASE_API_KEY=None)
    @patch("cookbook.firebase_auth_services.requests.post")
    def test_missing_api_key(self, mock_post):
        self.assertIsNone(sign_in_with_email_and_password("cook@example.org", "Password123"))
        mock_post.assert_not_called()


class VerifyIdTokenTests(TestCase):
    def test_empty_token(self):
        self.assertIsNone(verify_id_token(""))

    def test_without_app_or_mock(self):
        self.assertIsNone(verify_id_token("token"))

    @patch.object(firebase_auth, "verify_id_token")
    def test_valid_token(self, mock_verify):
        mock_verify.return_value = {"uid": "abc", "email": "cook@example.org"}
        self.assertEqual(verify_id_token("token")["email"], "cook@example.org")

    @patch.object(firebase_auth, "verify_id_token")
    def test_invalid_token(self, mock_verify):
        mock_verify.side_effect = firebase_auth.InvalidIdTokenError("bad token")
        self.assertIsNone(verify_id_token("token"))

    @patch.object(firebase_auth, "verify_id_token")
    def test_malformed_token(self, mock_verify):
        mock_verify.side_effect = ValueError("not a jwt")
        self.assertIsNone(verify_id_token("token"))


class PasswordResetLinkTests(TestCase):
    @patch.object(firebase_auth, "generate_password_reset_link")
    def test_link_returned(self, mock_link):
        mock_link.return_value = "https://example.org/reset"
        self.assertEqual(generate_password_reset_link("cook@example.org"), "https://example.org/reset")

    @patch.object(firebase_auth, "generate_password_reset_link")
    def test_unknown_user(self, mock_link):
        mock_link.side_effect = firebase_auth.UserNotFoundError("missing")
        self.assertIsNone(generate_password_reset_link("cook@example.org"))

    @patch.object(firebase_auth, "generate_password_reset_link")
    def test_missing_app(self, mock_link):
        mock_link.side_effect = ValueError("no app")
        self.assertIsNone(generate_password_reset_link("cook@example.org"))
