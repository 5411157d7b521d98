import logging

from django.conf import settings
from django.core.mail import send_mail
from django.urls import reverse_lazy
from django.views.generic import FormView, TemplateView

from cookbook.firebase_auth_services import generate_password_reset_link
from cookbook.forms import PasswordResetRequestForm
from cookbook.views.decorators import LoginProhibitedMixin

logger = logging.getLogger(__name__)


class PasswordResetRequestView(LoginProhibitedMixin, FormView):
    template_name = 'auth/password_reset_request.html'
    form_class = PasswordResetRequestForm
    success_url = reverse_lazy('password_reset_done')

    reset_link_generator = staticmethod(generate_password_reset_link)

    def form_valid(self, form):
        user = form.get_user()

        if user:
            link = self.reset_link_generator(user.email)
            if link:
                send_mail(
                    subject='Reset your recipebox password',
                    message=f'Click the following link to reset your password: {link}',
                    from_email=settings.DEFAULT_FROM_EMAIL,
                    recipient_list=[user.email],
                    fail_silently=False,
                )
            else:
                logger.info("No reset link generated for user %s", user.pk)

        # Same response whether or not the address is registered.
        return super().form_valid(form)


class PasswordResetDoneView(LoginProhibitedMixin, TemplateView):
    template_name = 'auth/password_reset_done.html'
