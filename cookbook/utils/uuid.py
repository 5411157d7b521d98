"""UUID helpers for recipe primary keys."""

import uuid


def uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when the interpreter has it, else uuid4."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


def parse_uuid(value):
    """Return value as a UUID, or None when it is not a valid UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None
