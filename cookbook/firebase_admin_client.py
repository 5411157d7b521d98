"""Firebase Admin SDK access for account provisioning.

The Admin app is created lazily from the service account file named in
settings. During a test run the SDK is left alone unless a test patches the
function it relies on, so the suite never talks to Google.
"""

import logging
import os
import sys

import firebase_admin
from django.conf import settings
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

logger = logging.getLogger(__name__)

_app = None


def is_mock(obj) -> bool:
    """True for unittest.mock objects patched in by a test."""
    return type(obj).__module__.startswith("unittest.mock")


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def running_tests() -> bool:
    """True under `manage.py test` or pytest."""
    return "test" in sys.argv or "pytest" in sys.modules


def _quiet() -> bool:
    return running_tests() and not env_flag("FIREBASE_VERBOSE_TEST_LOGS")


def _service_account():
    path = getattr(settings, "FIREBASE_SERVICE_ACCOUNT_FILE", None)
    if path and os.path.exists(path):
        return credentials.Certificate(path)
    if not _quiet():
        logger.warning("No Firebase service account at %r; Firebase features are off.", path)
    return None


def get_app():
    """Return the Firebase Admin app, creating it on first use; None when unavailable."""
    global _app
    if _app is not None:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if running_tests() and not (env_flag("FIREBASE_ALLOW_TEST_APP") or is_mock(firebase_admin.initialize_app)):
        return None

    certificate = _service_account()
    if certificate is None:
        return None
    try:
        _app = firebase_admin.initialize_app(certificate)
    except (ValueError, OSError) as exc:
        if not _quiet():
            logger.error("Failed to initialize Firebase: %s", exc)
    return _app


def _accounts_reachable() -> bool:
    if is_mock(auth.get_user_by_email) or is_mock(auth.create_user):
        return True
    if running_tests() and not env_flag("FIREBASE_ALLOW_TEST_AUTH"):
        return False
    return get_app() is not None


def _create_user(email, password, display_name):
    fields = {"email": email, "display_name": display_name}
    if password:
        fields["password"] = password
    try:
        record = auth.create_user(**fields)
    except FirebaseError as exc:
        if not _quiet():
            logger.error("Could not create Firebase user %s: %s", email, exc)
        return None
    logger.info("Created Firebase user for %s", email)
    return record


def ensure_firebase_user(email: str, password: str | None = None, display_name: str | None = None):
    """Return the Firebase account for email, creating it when there is none.

    Returns None when Firebase is unavailable, or when the lookup failed for
    any reason other than "no such user".
    """
    if not email or not _accounts_reachable():
        return None
    try:
        return auth.get_user_by_email(email)
    except auth.UserNotFoundError:
        return _create_user(email, password, display_name)
    except FirebaseError as exc:
        if not _quiet():
            logger.error("Firebase lookup for %s failed: %s", email, exc)
        return None
