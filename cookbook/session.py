"""Viewer session context.

The identity of the current viewer is an explicit value, populated when a
user signs in, cleared when they sign out, and handed to every service that
needs it. Nothing reads a global "current user".
"""

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from cookbook.repos.profile_repo import ProfileRepo

logger = logging.getLogger(__name__)

SESSION_KEY = "cookbook_viewer"


@dataclass(frozen=True)
class SessionContext:
    """Who is looking at the page; user_id is None for anonymous visitors."""

    user_id: Optional[int] = None
    display_name: str = ""
    avatar_url: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def to_session(self) -> dict:
        return asdict(self)

    @classmethod
    def from_session(cls, data) -> "SessionContext":
        if not isinstance(data, dict) or data.get("user_id") is None:
            return ANONYMOUS
        return cls(
            user_id=data["user_id"],
            display_name=data.get("display_name") or "",
            avatar_url=data.get("avatar_url") or "",
        )


ANONYMOUS = SessionContext()


def context_for_user(user, profile_repo: ProfileRepo | None = None) -> SessionContext:
    """Build the context for an authenticated user from their profile."""
    if user is None or not getattr(user, "is_authenticated", False):
        return ANONYMOUS
    profile = (profile_repo or ProfileRepo()).get_or_create_for_user(user)
    return SessionContext(
        user_id=user.pk,
        display_name=profile.display_name or user.username,
        avatar_url=profile.mini_avatar_url,
    )


def store(request, user) -> SessionContext:
    """Populate the session context after sign-in or a profile change."""
    context = context_for_user(user)
    request.session[SESSION_KEY] = context.to_session()
    logger.debug("Session context stored for user %s", context.user_id)
    return context


def clear(request) -> None:
    """Drop the session context on sign-out."""
    session = getattr(request, "session", None)
    if session is not None:
        session.pop(SESSION_KEY, None)


def current(request) -> SessionContext:
    """Return the viewer for this request.

    The stored context is trusted only while it belongs to the authenticated
    user; otherwise it is rebuilt (or cleared for anonymous requests).
    """
    user = getattr(request, "user", None)
    if user is None or not getattr(user, "is_authenticated", False):
        clear(request)
        return ANONYMOUS
    session = getattr(request, "session", None)
    stored = SessionContext.from_session(session.get(SESSION_KEY) if session is not None else None)
    if stored.user_id == user.pk:
        return stored
    if session is None:
        return context_for_user(user)
    return store(request, user)
