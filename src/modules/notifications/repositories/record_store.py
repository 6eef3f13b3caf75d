"""Record-store implementation of the notification repository."""

from __future__ import annotations

from typing import List

from pydantic import TypeAdapter

from modules.core.repositories.record_store import RecordStoreRepository
from modules.notifications.entities import Notification
from modules.notifications.repositories.interfaces import INotificationRepository


class NotificationRecordStoreRepository(
    RecordStoreRepository[List[Notification]], INotificationRepository
):
    adapter = TypeAdapter(List[Notification])
