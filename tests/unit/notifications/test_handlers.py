"""Unit tests for the order-event handlers feeding notifications."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import PersistenceError
from modules.core.storage.memory import InMemoryRecordStore
from modules.notifications.handlers import OrderCreatedHandler, OrderStatusChangedHandler
from modules.orders.events import OrderCreated, OrderStatusChanged
from modules.sessions.services import ActorSession

pytestmark = pytest.mark.unit


class NotificationWriteFailingStore(InMemoryRecordStore):
    """Accepts order writes, refuses notification writes."""

    def set(self, key, value):
        if "notifications_" in key:
            raise PersistenceError(f"Quota exceeded while writing {key}.")
        super().set(key, value)


def _created(role="customer"):
    return OrderCreated(
        aggregate_id="o1",
        actor_scope="u1",
        actor_role=role,
        order_number="QP-2024-001",
        shop_name="X",
    )


def _changed(role="customer"):
    return OrderStatusChanged(
        aggregate_id="o1",
        actor_scope="u1",
        actor_role=role,
        order_number="QP-2024-001",
        old_status="pending",
        new_status="accepted",
    )


class TestOrderCreatedHandler:
    def test_forwards_event(self):
        notifications = MagicMock()
        OrderCreatedHandler(notifications).handle(_created())
        notifications.notify_order_created.assert_called_once_with(
            order_id="o1", order_number="QP-2024-001", shop_name="X"
        )

    def test_persistence_error_is_logged_not_raised(self, caplog):
        notifications = MagicMock()
        notifications.notify_order_created.side_effect = PersistenceError("full")

        OrderCreatedHandler(notifications).handle(_created())

        assert any(
            "notification.delivery_failed" in record.getMessage()
            for record in caplog.records
        )


class TestOrderStatusChangedHandler:
    def test_customer_change(self):
        notifications = MagicMock()
        OrderStatusChangedHandler(notifications).handle(_changed())
        assert notifications.notify_status_changed.call_args.kwargs["by_partner"] is False

    def test_partner_change(self):
        notifications = MagicMock()
        OrderStatusChangedHandler(notifications).handle(_changed(role="partner"))
        kwargs = notifications.notify_status_changed.call_args.kwargs
        assert kwargs["by_partner"] is True
        assert kwargs["new_status"] == "accepted"

    def test_other_errors_propagate(self):
        notifications = MagicMock()
        notifications.notify_status_changed.side_effect = RuntimeError("bug")
        with pytest.raises(RuntimeError):
            OrderStatusChangedHandler(notifications).handle(_changed())


class TestDeliveryFailureInSession:
    @pytest.fixture()
    def session(self, customer, engine_settings):
        return ActorSession(
            customer, NotificationWriteFailingStore(), settings=engine_settings
        ).start()

    def test_order_creation_still_succeeds(self, session, print_spec, shop, caplog):
        order = session.orders.create_order(print_spec, shop)

        assert session.orders.get_order(order.id) == order
        assert session.notifications.list_notifications() == []
        assert any(
            "notification.delivery_failed" in record.getMessage()
            for record in caplog.records
        )

    def test_status_update_still_succeeds(self, session, print_spec, shop):
        order = session.orders.create_order(print_spec, shop)
        updated = session.orders.update_order_status(order.id, "accepted")
        assert session.orders.get_order(order.id).status == updated.status
