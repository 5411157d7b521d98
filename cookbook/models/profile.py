"""Public profile shown next to a user's recipes."""

import os

from django.db import models
from django.utils import timezone
from libgravatar import Gravatar

from .user import User


def avatar_upload_path(instance, filename):
    """Store avatars per user with a timestamp prefix so uploads never clash."""
    stamp = timezone.now().strftime("%Y%m%d%H%M%S")
    return f"avatars/{instance.user_id}/{stamp}_{os.path.basename(filename)}"


class Profile(models.Model):
    """Display name and avatar for a user; created together with the user."""

    user = models.OneToOneField(
        User,
        primary_key=True,
        on_delete=models.CASCADE,
        related_name='profile',
        db_column='id',
    )
    username = models.CharField(max_length=50, blank=True, null=True)
    avatar = models.ImageField(upload_to=avatar_upload_path, blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'profiles'

    def __str__(self):
        return self.display_name or f"profile {self.user_id}"

    @property
    def display_name(self):
        """Chosen display name, or '' when the user never set one."""
        return (self.username or "").strip()

    def gravatar(self, size=120):
        """Return gravatar URL for the owner's email."""
        return Gravatar(self.user.email).get_image(size=size, default='mp')

    def avatar_or_gravatar(self, size=120):
        """Return uploaded avatar URL or a gravatar fallback."""
        if self.avatar:
            try:
                return self.avatar.url
            except ValueError:
                pass
        return self.gravatar(size=size)

    @property
    def avatar_url(self):
        return self.avatar_or_gravatar(size=200)

    @property
    def mini_avatar_url(self):
        return self.avatar_or_gravatar(size=60)
