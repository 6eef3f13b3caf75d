from dataclasses import FrozenInstanceError

import pytest

from modules.orders.events import OrderCreated, OrderStatusChanged
from shared.infrastructure.bus import InMemoryEventBus

pytestmark = pytest.mark.unit


class Recorder:
    def __init__(self):
        self.events = []

    def handle(self, event):
        self.events.append(event)


def _created():
    return OrderCreated(
        aggregate_id="o1",
        actor_scope="u1",
        actor_role="customer",
        order_number="QP-2024-001",
        shop_name="X",
    )


class TestDomainEvent:
    def test_event_name(self):
        assert _created().event_name == "OrderCreated"

    def test_event_ids_are_unique(self):
        assert _created().event_id != _created().event_id

    def test_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            _created().shop_name = "Y"


class TestInMemoryEventBus:
    def test_routes_by_event_type(self):
        bus = InMemoryEventBus()
        created, changed = Recorder(), Recorder()
        bus.subscribe(OrderCreated, created)
        bus.subscribe(OrderStatusChanged, changed)

        event = _created()
        bus.publish(event)

        assert created.events == [event]
        assert changed.events == []

    def test_handlers_run_in_subscription_order(self):
        bus = InMemoryEventBus()
        calls = []
        first, second = Recorder(), Recorder()
        first.handle = lambda e: calls.append("first")
        second.handle = lambda e: calls.append("second")
        bus.subscribe(OrderCreated, first)
        bus.subscribe(OrderCreated, second)

        bus.publish(_created())
        assert calls == ["first", "second"]

    def test_duplicate_subscription_ignored(self):
        bus = InMemoryEventBus()
        recorder = Recorder()
        bus.subscribe(OrderCreated, recorder)
        bus.subscribe(OrderCreated, recorder)

        bus.publish(_created())
        assert len(recorder.events) == 1

    def test_publish_without_handlers(self):
        InMemoryEventBus().publish(_created())

    def test_clear(self):
        bus = InMemoryEventBus()
        recorder = Recorder()
        bus.subscribe(OrderCreated, recorder)
        bus.clear()

        bus.publish(_created())
        assert recorder.events == []
