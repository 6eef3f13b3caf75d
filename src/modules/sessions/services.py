"""Actor sessions: wiring and hydration of the two engines.

An ``ActorSession`` is built once per signed-in actor and handed to view
adapters by reference.  It owns the event bus, both services and their
handlers, so nothing about one actor survives into the next session.
``SessionManager`` follows the identity provider and swaps sessions
whenever the current actor changes.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

import structlog

from modules.core.clock import utcnow
from modules.core.conf import EngineSettings
from modules.core.exceptions import AuthRequiredError
from modules.identity.scopes import ScopeKeys
from modules.notifications.handlers import OrderCreatedHandler, OrderStatusChangedHandler
from modules.notifications.repositories import NotificationRecordStoreRepository
from modules.notifications.services import NotificationService
from modules.orders.events import OrderCreated, OrderStatusChanged
from modules.orders.repositories import (
    LedgerRecordStoreRepository,
    OrderRecordStoreRepository,
)
from modules.orders.services import OrderService
from shared.infrastructure.bus import InMemoryEventBus

if TYPE_CHECKING:
    from modules.core.storage.interfaces import IRecordStore
    from modules.identity.dtos import Actor
    from modules.identity.providers import IIdentityProvider

logger = structlog.get_logger(__name__)


class ActorSession:
    """Both engines for one actor, sharing one record store and event bus."""

    def __init__(
        self,
        actor: Actor,
        store: IRecordStore,
        settings: Optional[EngineSettings] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.actor = actor
        self.scope = ScopeKeys.for_actor(actor)
        self.event_bus = InMemoryEventBus()
        self.orders = OrderService(
            actor=actor,
            order_repository=OrderRecordStoreRepository(store),
            ledger_repository=LedgerRecordStoreRepository(store),
            event_bus=self.event_bus,
            settings=settings or EngineSettings.from_django(),
            clock=clock,
        )
        self.notifications = NotificationService(
            actor=actor,
            repository=NotificationRecordStoreRepository(store),
            clock=clock,
        )
        self.event_bus.subscribe(OrderCreated, OrderCreatedHandler(self.notifications))
        self.event_bus.subscribe(
            OrderStatusChanged, OrderStatusChangedHandler(self.notifications)
        )

    def start(self) -> ActorSession:
        """Hydrate orders and notifications from the record store."""
        orders = self.orders.load_orders()
        notifications = self.notifications.load_notifications()
        logger.info(
            "session.hydrated",
            actor_scope=self.scope.actor_key,
            role=self.actor.role.value,
            order_count=len(orders),
            notification_count=len(notifications),
            seeded=self.orders.seeded,
        )
        return self

    def close(self) -> None:
        self.event_bus.clear()
        logger.info("session.closed", actor_scope=self.scope.actor_key)


class SessionManager:
    """Hands out the session of whoever the identity provider says is signed in."""

    def __init__(
        self,
        identity_provider: IIdentityProvider,
        store: IRecordStore,
        settings: Optional[EngineSettings] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._identity = identity_provider
        self._store = store
        self._settings = settings
        self._clock = clock
        self._session: Optional[ActorSession] = None

    def current(self) -> ActorSession:
        """Return the current actor's session, re-hydrating on actor change.

        Raises:
            AuthRequiredError: nobody is signed in.
        """
        actor = self._identity.current_actor()
        if actor is None:
            self.end()
            raise AuthRequiredError("No actor is signed in.")

        if self._session is None or self._session.actor != actor:
            self.end()
            self._session = ActorSession(
                actor, self._store, settings=self._settings, clock=self._clock
            ).start()
        return self._session

    def end(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
