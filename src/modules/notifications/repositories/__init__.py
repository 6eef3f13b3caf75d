"""Notification repositories package."""

from modules.notifications.repositories.interfaces import INotificationRepository
from modules.notifications.repositories.record_store import (
    NotificationRecordStoreRepository,
)

__all__ = ["INotificationRepository", "NotificationRecordStoreRepository"]
