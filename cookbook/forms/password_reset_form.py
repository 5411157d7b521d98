from django import forms

from cookbook.repos.user_repo import UserRepo


class PasswordResetRequestForm(forms.Form):
    """Email address that a password reset link is sent to."""

    email = forms.EmailField(
        label="Email address",
        max_length=254,
        widget=forms.EmailInput(attrs={"autocomplete": "email", "placeholder": "you@example.com"}),
    )

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()

    def get_user(self):
        """The account registered under the email, or None; call after is_valid()."""
        if not self.is_valid():
            return None
        return UserRepo().get_by_email(self.cleaned_data["email"])
