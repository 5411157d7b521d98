import logging

from django import forms
from django.contrib.auth import authenticate

from cookbook.firebase_auth_services import sign_in_with_email_and_password
from cookbook.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)


class LogInForm(forms.Form):
    """Authenticate a user by email/password against Firebase, then Django."""
    email = forms.EmailField(label="Email")
    password = forms.CharField(label="Password", widget=forms.PasswordInput())

    def get_user(self):
        """Return the authenticated user or None after validating credentials."""
        if not self.is_valid():
            return None

        email = self.cleaned_data.get("email")
        password = self.cleaned_data.get("password")
        if not email or not password:
            return None

        user = self._get_django_user(email)
        if not user or not user.is_active:
            return None

        authed = self._authenticate_with_firebase(user, password) or self._authenticate_with_django(
            user.username, password
        )
        logger.debug("Log in for %s %s", email, "succeeded" if authed else "failed")
        return authed

    def _authenticate_with_firebase(self, user, password):
        result = sign_in_with_email_and_password(email=user.email, password=password)
        if result is None:
            return None
        user.backend = "django.contrib.auth.backends.ModelBackend"
        return user

    def _authenticate_with_django(self, username, password):
        return authenticate(username=username, password=password)

    def _get_django_user(self, email):
        user = UserRepo().get_by_email(email)
        if user is None:
            logger.debug("No Django user with that email")
        return user
