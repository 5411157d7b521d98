"""Forms for profile editing and signup."""

from django import forms
from django.core.validators import RegexValidator

from cookbook.firebase_admin_client import ensure_firebase_user
from cookbook.models import Profile, User
from cookbook.services.profile import ProfileService


class AvatarFileInput(forms.FileInput):
    """File input for avatar uploads; removal goes through remove_avatar."""
    def __init__(self, attrs=None):
        super().__init__(attrs={"accept": "image/*", **(attrs or {})})


class ProfileForm(forms.ModelForm):
    """Form to update the public display name and avatar."""
    avatar = forms.ImageField(required=False, widget=AvatarFileInput())
    remove_avatar = forms.BooleanField(required=False, label="Remove current avatar")

    class Meta:
        """Model/field config for the profile form."""
        model = Profile
        fields = ['username', 'avatar']
        labels = {
            'username': 'Display name',
        }

    def clean_username(self):
        return (self.cleaned_data.get('username') or '').strip()

    def save(self, commit=True):
        """Save through ProfileService, which owns avatar replacement."""
        return ProfileService().update(
            self.instance.user,
            username=self.cleaned_data.get('username'),
            avatar=self.cleaned_data.get('avatar'),
            remove_avatar=self.cleaned_data.get('remove_avatar'),
        )


class NewPasswordMixin(forms.Form):
    """Mixin providing password and password confirmation fields."""
    new_password = forms.CharField(
        label='Password',
        widget=forms.PasswordInput(),
        min_length=8,
        validators=[
            RegexValidator(
                regex=r'^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9]).*$',
                message=(
                    'Password must contain an uppercase character, '
                    'a lowercase character, and a number'
                )
            )
        ]
    )
    password_confirmation = forms.CharField(label='Password confirmation', widget=forms.PasswordInput())

    def clean(self):
        """Validate new password and confirmation match."""
        super().clean()
        new_password = self.cleaned_data.get('new_password')
        password_confirmation = self.cleaned_data.get('password_confirmation')
        if new_password != password_confirmation:
            self.add_error(
                'password_confirmation',
                'Confirmation does not match password.'
            )


class SignUpForm(NewPasswordMixin, forms.ModelForm):
    """Form to register a new user with Django and Firebase."""
    class Meta:
        """Model/field config for signup form."""
        model = User
        fields = ['email', 'username']
        help_texts = {
            'username': 'At least 3 letters, digits or underscores. Shown on your recipes.',
        }

    def clean_email(self):
        email = (self.cleaned_data.get('email') or '').strip().lower()
        if not email:
            raise forms.ValidationError('Please enter your email address.')
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError('This email address is already registered.')
        return email

    def save(self):
        """Create and return a new User in Django and Firebase."""
        super().save(commit=False)

        username = self.cleaned_data.get('username')
        email = self.cleaned_data.get('email')
        password = self.cleaned_data.get('new_password')

        user = User.objects.create_user(
            username,
            email=email,
            password=password,
        )
        ProfileService().update(user, username=username)
        ensure_firebase_user(email, password=password, display_name=username)
        return user
