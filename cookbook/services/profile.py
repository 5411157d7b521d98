"""Service helpers for editing a user's public profile."""

import logging

from cookbook.repos.profile_repo import ProfileRepo

logger = logging.getLogger(__name__)


class ProfileService:
    """Update display name and avatar for the profile owner."""

    def __init__(self, profile_repo: ProfileRepo | None = None):
        """Bind the service to a profile repository."""
        self.profile_repo = profile_repo or ProfileRepo()

    def profile_for(self, user):
        """Return the user's profile, creating it if an older account has none."""
        return self.profile_repo.get_or_create_for_user(user)

    def update(self, user, *, username=None, avatar=None, remove_avatar=False):
        """Save a new display name and resolve the avatar upload."""
        profile = self.profile_for(user)
        profile.username = (username or "").strip() or None
        profile.avatar = self._resolve_avatar(profile.avatar, avatar, remove_avatar)
        profile.save()
        logger.info("Profile updated for user %s", user.pk)
        return profile

    def _delete_avatar(self, avatar_file):
        if avatar_file:
            avatar_file.delete(save=False)

    def _replace_avatar(self, existing_avatar, new_avatar):
        if existing_avatar and existing_avatar != new_avatar:
            self._delete_avatar(existing_avatar)

    def _resolve_avatar(self, existing_avatar, new_avatar, remove_avatar):
        if remove_avatar:
            self._delete_avatar(existing_avatar)
            return None
        if new_avatar:
            self._replace_avatar(existing_avatar, new_avatar)
            return new_avatar
        return existing_avatar or None
