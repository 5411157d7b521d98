"""Generic ORM accessor shared by the recipe, rating and profile stores."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Type

from django.db import DatabaseError, IntegrityError
from django.db.models import Model, QuerySet

from cookbook.errors import TransportError

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors():
    """Re-raise backend failures as TransportError.

    Constraint violations (IntegrityError) pass through untouched so callers
    can map them to a business error.
    """
    try:
        yield
    except IntegrityError:
        raise
    except DatabaseError as exc:
        logger.error("Database failure: %s", exc)
        raise TransportError() from exc


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
        as_dict: bool = False,
    ) -> List[Model] | List[Dict[str, Any]]:
        """Return a filtered, ordered and sliced list of rows (or dicts)."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        if order_by:
            qs = qs.order_by(*order_by)
        qs = self._apply_slice(qs, offset=offset, limit=limit)
        return self.fetch(qs.values() if as_dict else qs)

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        if not (offset or limit is not None):
            return qs
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def fetch(self, qs: Iterable) -> List:
        """Evaluate a queryset, reporting backend failures as TransportError."""
        with translate_db_errors():
            return list(qs)

    def exists(self, **lookup: Any) -> bool:
        """Return True when at least one row matches the lookup."""
        with translate_db_errors():
            return self.model.objects.filter(**lookup).exists()

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        with translate_db_errors():
            return self.model.objects.get(**lookup)

    def find(self, **lookup: Any) -> Optional[Model]:
        """Fetch a single object matching the lookup, or None."""
        with translate_db_errors():
            return self.model.objects.filter(**lookup).first()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        with translate_db_errors():
            return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        with translate_db_errors():
            return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count of rows removed."""
        with translate_db_errors():
            deleted, per_model = self.model.objects.filter(**lookup).delete()
        return per_model.get(self.model._meta.label, 0)
