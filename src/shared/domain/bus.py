"""Event bus contracts between the two engines.

The order engine publishes on a session's bus; the notification engine
subscribes to it.  Handlers run in-process, synchronously, before
``publish`` returns, so an order call that returns has already produced
its notification (or logged why it could not).
"""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

EventT = TypeVar("EventT", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[EventT]):
    """Consumes one event type.  Exceptions it lets through reach the publisher."""

    def handle(self, event: EventT) -> None: ...


class IEventBus(Protocol):
    """Session-scoped publish/subscribe channel."""

    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(
        self, event_class: Type[EventT], handler: IEventHandler[EventT]
    ) -> None: ...

    def clear(self) -> None:
        """Drop every subscription; called when the session ends."""
        ...
