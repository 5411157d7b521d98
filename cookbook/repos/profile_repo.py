"""Repository helpers for profile lookups."""

from typing import Dict, Iterable, Optional

from cookbook.db_accessor import DB_Accessor
from cookbook.models.profile import Profile


class ProfileRepo(DB_Accessor):
    """Repository for Profile rows (display names and avatars)."""
    def __init__(self) -> None:
        """Initialise with the Profile model."""
        super().__init__(Profile)

    def get_for_user(self, user_id: int) -> Optional[Profile]:
        """Return the user's profile, or None if it has not been created."""
        return self.find(user_id=user_id)

    def get_or_create_for_user(self, user) -> Profile:
        """Return the user's profile, creating an empty one when missing."""
        profile = self.get_for_user(user.pk)
        if profile is None:
            profile = self.create(user=user)
        return profile

    def display_names(self, user_ids: Iterable[int]) -> Dict[int, str]:
        """Map user id to display name for every id that has one set.

        Ids without a profile, or with a blank name, are left out so the
        caller applies its own placeholder.
        """
        ids = {uid for uid in user_ids if uid is not None}
        if not ids:
            return {}
        rows = self.list(filters={"user_id__in": ids}, as_dict=True)
        names = {}
        for row in rows:
            name = (row.get("username") or "").strip()
            if name:
                names[row["user_id"]] = name
        return names
