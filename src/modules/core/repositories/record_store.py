"""Record-store backed repository base.

Serializes collections with a pydantic ``TypeAdapter`` (camelCase field
names, ISO-8601 timestamps) and turns every decode failure into a
``PersistenceError``.
"""

from __future__ import annotations

import json
from typing import Any, Generic, Optional, TypeVar

import structlog
from pydantic import TypeAdapter

from modules.core.exceptions import PersistenceError
from modules.core.repositories.interfaces import IRepository
from modules.core.storage.interfaces import IRecordStore

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class RecordStoreRepository(IRepository[T], Generic[T]):
    """Concrete repository over an ``IRecordStore``.

    Subclasses set ``adapter`` to the ``TypeAdapter`` of their collection
    type and may override ``_coerce`` to accept older payload shapes.
    """

    adapter: TypeAdapter[Any]

    def __init__(self, store: IRecordStore) -> None:
        self._store = store

    def get(self, key: str) -> Optional[T]:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return self.adapter.validate_python(self._coerce(json.loads(raw)))
        except ValueError as exc:
            logger.error("repository.corrupted_payload", key=key, error=str(exc))
            raise PersistenceError(f"Corrupted payload under {key}.") from exc

    def save(self, key: str, collection: T) -> T:
        payload = self.adapter.dump_json(collection, by_alias=True).decode()
        self._store.set(key, payload)
        return collection

    def _coerce(self, data: Any) -> Any:
        return data
