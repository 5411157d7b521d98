"""Firebase Auth calls made on behalf of the log in, API and password reset flows."""

import logging

import requests
from django.conf import settings
from firebase_admin import auth as firebase_auth
from firebase_admin.exceptions import FirebaseError

from .auth_errors import error_code_from_response, friendly_auth_message
from .firebase_admin_client import get_app, is_mock, running_tests

logger = logging.getLogger(__name__)

SIGN_IN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"


def sign_in_with_email_and_password(email: str, password: str):
    """Check credentials with the Firebase REST API; return its JSON body or None."""
    # Tests only reach the network through a patched requests.post.
    if running_tests() and not is_mock(requests.post):
        return None

    api_key = getattr(settings, "FIREBASE_API_KEY", None)
    if not api_key:
        if not running_tests():
            logger.warning("Firebase sign-in skipped: FIREBASE_API_KEY not configured")
        return None

    try:
        response = requests.post(
            SIGN_IN_URL,
            params={"key": api_key},
            json={"email": email, "password": password, "returnSecureToken": True},
            timeout=10,
        )
    except requests.RequestException as exc:
        logger.warning("Firebase sign-in request failed: %s", exc)
        return None

    if response.status_code != 200:
        code = error_code_from_response(response)
        logger.warning(
            "Firebase sign-in rejected for %s (status=%s): %s",
            email,
            response.status_code,
            friendly_auth_message(code) or "no error code",
        )
        return None
    return response.json()


def verify_id_token(id_token: str):
    """Decode a Firebase ID token; return the claims dict or None when invalid."""
    if not id_token:
        return None
    if get_app() is None and not is_mock(firebase_auth.verify_id_token):
        return None
    try:
        return firebase_auth.verify_id_token(id_token)
    except (ValueError, FirebaseError) as exc:
        logger.info("Rejected Firebase ID token: %s", exc)
        return None


def generate_password_reset_link(email: str):
    """Ask Firebase for a password reset link; None for unknown accounts or failures."""
    get_app()
    try:
        return firebase_auth.generate_password_reset_link(email)
    except firebase_auth.UserNotFoundError:
        logger.info("No Firebase account for password reset: %s", email)
    except (ValueError, FirebaseError) as exc:
        logger.warning("Could not generate a password reset link: %s", exc)
    return None
