"""Notification repository interface.

Notifications are stored newest first as one list per actor scope key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.notifications.entities import Notification


class INotificationRepository(IRepository[List["Notification"]]):
    """Repository contract for an actor's notification collection."""
