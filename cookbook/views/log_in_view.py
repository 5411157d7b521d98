from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login
from django.shortcuts import redirect, render
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.cache import never_cache

from cookbook.forms.log_in_form import LogInForm
from cookbook.utils.http import safe_next_url
from cookbook.views.decorators import LoginProhibitedMixin


@method_decorator(never_cache, name="dispatch")
class LogInView(LoginProhibitedMixin, View):
    """Email and password log in; honours a local ?next= target."""

    template_name = "auth/log_in.html"
    error_message = "The email or password is incorrect."

    def dispatch(self, request, *args, **kwargs):
        self.next = safe_next_url(request, "")
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        return self._render(LogInForm())

    def post(self, request):
        form = LogInForm(request.POST)
        user = form.get_user()
        if user is not None:
            # user_logged_in populates the viewer session context.
            login(request, user, backend="django.contrib.auth.backends.ModelBackend")
            messages.success(request, "You have logged in successfully!")
            return redirect(self.next or settings.REDIRECT_URL_WHEN_LOGGED_IN)
        if not form.errors:
            form.add_error(None, self.error_message)
        messages.error(request, self.error_message)
        return self._render(form)

    def _render(self, form):
        return render(self.request, self.template_name, {"form": form, "next": self.next})
