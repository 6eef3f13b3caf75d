"""Persistent record store contract.

A pure key-value primitive: no business rules, no partial updates.
Every collection is written and read back as one serialized string, so
any backend that can hold text under a key (local database, browser
storage bridge, remote HTTP API) can satisfy it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class IRecordStore(ABC):
    """Key-value store scoped by deterministic scope keys.

    Implementations raise ``PersistenceError`` when a read or write fails.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the serialized collection stored under ``key``, or ``None``."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace the serialized collection stored under ``key``."""
