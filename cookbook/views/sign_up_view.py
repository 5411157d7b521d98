from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login as auth_login
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic.edit import FormView

from cookbook.forms import SignUpForm
from cookbook.views.decorators import LoginProhibitedMixin


class SignUpView(LoginProhibitedMixin, FormView):
    """
    Handles user registration via SignUpForm.

    The form creates the local user, their profile and the Firebase account;
    the view then signs the new user in.
    """

    template_name = "auth/sign_up.html"
    form_class = SignUpForm
    success_url = reverse_lazy(settings.REDIRECT_URL_WHEN_LOGGED_IN)

    def form_valid(self, form):
        user = form.save()
        auth_login(
            self.request,
            user,
            backend="django.contrib.auth.backends.ModelBackend",
        )
        messages.add_message(self.request, messages.SUCCESS, "Welcome! Your account is ready.")
        return redirect(self.get_success_url())
