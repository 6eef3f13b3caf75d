"""Django ORM implementation of the record store.

One ``StoredRecord`` row per scope key; ``set`` is an upsert so each
collection write replaces the previous payload atomically.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import DatabaseError, transaction

from modules.core.exceptions import PersistenceError
from modules.core.models import StoredRecord
from modules.core.storage.interfaces import IRecordStore

logger = structlog.get_logger(__name__)


class DjangoRecordStore(IRecordStore):
    """Concrete record store backed by the ``stored_records`` table."""

    def get(self, key: str) -> Optional[str]:
        try:
            return (
                StoredRecord.objects.filter(key=key)
                .values_list("value", flat=True)
                .first()
            )
        except DatabaseError as exc:
            logger.error("record_store.read_failed", key=key, error=str(exc))
            raise PersistenceError(f"Could not read {key}.") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with transaction.atomic():
                _, created = StoredRecord.objects.update_or_create(
                    key=key, defaults={"value": value}
                )
        except DatabaseError as exc:
            logger.error("record_store.write_failed", key=key, error=str(exc))
            raise PersistenceError(f"Could not write {key}.") from exc
        logger.debug("record_store.written", key=key, created=created)
