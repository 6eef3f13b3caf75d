"""Event handlers turning order events into notifications.

Delivery is best-effort: a store failure while recording a notification
is logged and swallowed, because the order change that triggered it has
already been persisted and must still be reported as a success.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.core.exceptions import PersistenceError
from modules.identity.constants import ActorRole
from modules.orders.events import OrderCreated, OrderStatusChanged
from shared.domain.bus import IEventHandler

if TYPE_CHECKING:
    from modules.notifications.services import NotificationService

logger = structlog.get_logger(__name__)


class OrderCreatedHandler(IEventHandler[OrderCreated]):
    def __init__(self, notifications: NotificationService) -> None:
        self._notifications = notifications

    def handle(self, event: OrderCreated) -> None:
        try:
            self._notifications.notify_order_created(
                order_id=event.aggregate_id,
                order_number=event.order_number,
                shop_name=event.shop_name,
            )
        except PersistenceError as exc:
            logger.warning(
                "notification.delivery_failed",
                event_name=event.event_name,
                order_id=event.aggregate_id,
                error=str(exc),
            )


class OrderStatusChangedHandler(IEventHandler[OrderStatusChanged]):
    def __init__(self, notifications: NotificationService) -> None:
        self._notifications = notifications

    def handle(self, event: OrderStatusChanged) -> None:
        try:
            self._notifications.notify_status_changed(
                order_id=event.aggregate_id,
                order_number=event.order_number,
                new_status=event.new_status,
                by_partner=event.actor_role == ActorRole.PARTNER,
            )
        except PersistenceError as exc:
            logger.warning(
                "notification.delivery_failed",
                event_name=event.event_name,
                order_id=event.aggregate_id,
                error=str(exc),
            )
