"""Notification entity."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from modules.notifications.constants import NotificationType


class Notification(BaseModel):
    """An event record derived from an order transition.

    ``read`` is the only field that ever changes, and only by replacing
    the whole value.  ``order_id`` is a weak reference: the order may be
    gone without the notification going with it.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: datetime
    read: bool = False
    order_id: str

    def mark_read(self) -> Notification:
        if self.read:
            return self
        return self.model_copy(update={"read": True})
