"""Repository helpers for user lookups."""

from typing import Optional

from cookbook.db_accessor import DB_Accessor
from cookbook.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email (case-insensitive), or None."""
        if not email:
            return None
        return self.find(email__iexact=email.strip())

    def get_by_username(self, username: str) -> Optional[User]:
        """Return a user by username, or None."""
        return self.find(username=username)
