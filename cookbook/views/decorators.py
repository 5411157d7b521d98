from django.conf import settings
from django.shortcuts import redirect


class LoginProhibitedMixin:
    """Send signed-in users away from the log in, sign up and password reset pages."""

    redirect_when_logged_in_url = None

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            return redirect(self.get_redirect_when_logged_in_url())
        return super().dispatch(request, *args, **kwargs)

    def get_redirect_when_logged_in_url(self):
        """The class attribute when set, else REDIRECT_URL_WHEN_LOGGED_IN."""
        return self.redirect_when_logged_in_url or settings.REDIRECT_URL_WHEN_LOGGED_IN
