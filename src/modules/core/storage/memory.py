"""In-process record store.

Stands in for the browser-style local storage the engines were first
built against, including its size quota.
"""

from __future__ import annotations

from typing import Dict, Optional

import structlog

from modules.core.exceptions import PersistenceError
from modules.core.storage.interfaces import IRecordStore

logger = structlog.get_logger(__name__)


class InMemoryRecordStore(IRecordStore):
    """Dict-backed store with an optional total size quota (in characters)."""

    def __init__(self, quota: Optional[int] = None) -> None:
        self._records: Dict[str, str] = {}
        self._quota = quota

    def get(self, key: str) -> Optional[str]:
        return self._records.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            used = sum(len(v) for k, v in self._records.items() if k != key)
            if used + len(value) > self._quota:
                logger.warning(
                    "record_store.quota_exceeded",
                    key=key,
                    used=used,
                    requested=len(value),
                    quota=self._quota,
                )
                raise PersistenceError(f"Quota exceeded while writing {key}.")
        self._records[key] = value

    def keys(self) -> list[str]:
        return sorted(self._records)
