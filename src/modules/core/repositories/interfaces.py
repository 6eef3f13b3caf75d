"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that the order and
notification repositories extend.  ``T`` is the whole collection stored
under one scope key: collections are read and written as a unit, never
row by row.  Service-layer code depends on this abstraction, never on a
concrete record store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract."""

    @abstractmethod
    def get(self, key: str) -> Optional[T]:
        """Return the collection stored under ``key``, or ``None`` if absent."""

    @abstractmethod
    def save(self, key: str, collection: T) -> T:
        """Persist the full collection under ``key``, replacing the old one."""
