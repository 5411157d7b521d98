from django.contrib.auth import user_logged_in, user_logged_out
from django.db.models.signals import post_save
from django.dispatch import receiver

from cookbook import session
from cookbook.models import Profile, User


@receiver(post_save, sender=User)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    """Every user gets an empty profile row when the account is created."""
    if created:
        Profile.objects.get_or_create(user=instance)


@receiver(user_logged_in)
def populate_session_context(sender, request, user, **kwargs):
    """Store the viewer context as soon as a user signs in."""
    if request is not None and hasattr(request, "session"):
        session.store(request, user)


@receiver(user_logged_out)
def clear_session_context(sender, request, user, **kwargs):
    """Drop the viewer context when the user signs out."""
    if request is not None:
        session.clear(request)
