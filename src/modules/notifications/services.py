"""Notification service layer.

Keeps the acting actor's notification projection, derives one
notification per order transition, and flips read flags.  Every change
replaces the affected values and persists the full collection; values
returned earlier are never modified.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional

import structlog
import uuid6

from modules.core.clock import utcnow
from modules.core.exceptions import AuthRequiredError
from modules.identity.scopes import ScopeKeys
from modules.notifications.constants import (
    ORDER_CREATED_MESSAGE,
    ORDER_CREATED_TITLE,
    ORDER_UPDATED_MESSAGE,
    ORDER_UPDATED_TITLE,
    STATUS_UPDATE_MESSAGE,
    STATUS_UPDATE_TITLE,
    NotificationType,
)
from modules.notifications.entities import Notification
from modules.orders.constants import status_label

if TYPE_CHECKING:
    from modules.identity.dtos import Actor
    from modules.notifications.repositories.interfaces import INotificationRepository

logger = structlog.get_logger(__name__)


class NotificationService:
    """Application service for one actor's notifications."""

    def __init__(
        self,
        actor: Optional[Actor],
        repository: INotificationRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._actor = actor
        self._keys = ScopeKeys.for_actor(actor) if actor else None
        self._repo = repository
        self._clock = clock
        self._notifications: Optional[List[Notification]] = None

    def load_notifications(self) -> List[Notification]:
        self._require_actor()
        stored = self._repo.get(self._keys.notifications)
        self._notifications = stored if stored is not None else []
        logger.info(
            "notification.collection_loaded",
            actor_scope=self._keys.actor_key,
            count=len(self._notifications),
        )
        return list(self._notifications)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def notify_order_created(self, order_id: str, order_number: str, shop_name: str) -> Notification:
        return self._record(
            NotificationType.ORDER_CREATED,
            ORDER_CREATED_TITLE,
            ORDER_CREATED_MESSAGE.format(order_number=order_number, shop_name=shop_name),
            order_id,
        )

    def notify_status_changed(
        self,
        order_id: str,
        order_number: str,
        new_status: str,
        by_partner: bool = False,
    ) -> Notification:
        """Customer changes yield ``status_update``, partner changes ``order_updated``."""
        label = status_label(new_status)
        if by_partner:
            return self._record(
                NotificationType.ORDER_UPDATED,
                ORDER_UPDATED_TITLE.format(order_number=order_number),
                ORDER_UPDATED_MESSAGE.format(status_label=label),
                order_id,
            )
        return self._record(
            NotificationType.STATUS_UPDATE,
            STATUS_UPDATE_TITLE.format(order_number=order_number),
            STATUS_UPDATE_MESSAGE.format(status_label=label),
            order_id,
        )

    # ------------------------------------------------------------------
    # Read flags
    # ------------------------------------------------------------------

    def mark_read(self, notification_id: str) -> Optional[Notification]:
        """Mark one notification read; unknown ids are ignored."""
        self._require_actor()
        current = self._current()
        target = next((n for n in current if n.id == notification_id), None)
        if target is None or target.read:
            return target

        updated = target.mark_read()
        self._replace([updated if n.id == notification_id else n for n in current])
        logger.info(
            "notification.marked_read",
            actor_scope=self._keys.actor_key,
            notification_id=notification_id,
        )
        return updated

    def mark_all_read(self) -> int:
        """Mark every notification read and return how many changed."""
        self._require_actor()
        current = self._current()
        changed = sum(1 for n in current if not n.read)
        if changed:
            self._replace([n.mark_read() for n in current])
        logger.info(
            "notification.marked_all_read",
            actor_scope=self._keys.actor_key,
            changed=changed,
        )
        return changed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def unread_count(self) -> int:
        self._require_actor()
        return sum(1 for n in self._current() if not n.read)

    def list_notifications(self) -> List[Notification]:
        """Newest first."""
        self._require_actor()
        return list(self._current())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _record(
        self,
        notification_type: NotificationType,
        title: str,
        message: str,
        order_id: str,
    ) -> Notification:
        self._require_actor()
        notification = Notification(
            id=str(uuid6.uuid7()),
            type=notification_type,
            title=title,
            message=message,
            timestamp=self._clock(),
            read=False,
            order_id=order_id,
        )
        self._replace([notification, *self._current()])
        logger.info(
            "notification.created",
            actor_scope=self._keys.actor_key,
            notification_type=notification_type.value,
            order_id=order_id,
        )
        return notification

    def _replace(self, notifications: List[Notification]) -> None:
        self._repo.save(self._keys.notifications, notifications)
        self._notifications = notifications

    def _require_actor(self) -> Actor:
        if self._actor is None:
            raise AuthRequiredError("Sign in to see notifications.")
        return self._actor

    def _current(self) -> List[Notification]:
        if self._notifications is None:
            self.load_notifications()
        return self._notifications
