"""Unit tests for the record-store order repositories.

Covers:
- Round-trip of an order collection, all fields and timestamps.
- Payload shape written to the store (camelCase envelope).
- Legacy bare-list payloads.
- Corrupted payloads become PersistenceError.
- Ledger append ordering.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from modules.core.exceptions import PersistenceError
from modules.identity.constants import LEDGER_KEY
from modules.identity.dtos import CustomerContactDTO
from modules.orders.constants import OrderStatus
from modules.orders.entities import Order, OrderCollection
from modules.orders.repositories import (
    LedgerRecordStoreRepository,
    OrderRecordStoreRepository,
)

pytestmark = pytest.mark.unit

KEY = "orders_u1"


@pytest.fixture()
def repo(store):
    return OrderRecordStoreRepository(store)


@pytest.fixture()
def order():
    return Order(
        id="0190c7a4-0000-7000-8000-000000000001",
        order_number="QP-2024-001",
        file_name="Research_Paper_Final.pdf",
        file_url="https://example.com/uploads/Research_Paper_Final.pdf",
        shop_name="Print Express - JNTU",
        shop_email="print.express@example.com",
        college="CBIT",
        pages=25,
        color=True,
        double_sided=True,
        copies=1,
        binding="Spiral Bound",
        total_cost=Decimal("120.50"),
        customer_id="u1",
        customer=CustomerContactDTO(name="Student", phone="9876543210"),
        status=OrderStatus.ACCEPTED,
        status_text="Accepted",
        created_at=datetime(2024, 3, 1, 9, 15, 30, 123456, tzinfo=timezone.utc),
        updated_at=datetime(2024, 3, 1, 21, 0, 5, tzinfo=timezone.utc),
    )


def test_get_absent_returns_none(repo):
    assert repo.get(KEY) is None


def test_round_trip_preserves_every_field(repo, order):
    repo.save(KEY, OrderCollection(next_sequence=2, orders=(order,)))
    loaded = repo.get(KEY)

    assert loaded.next_sequence == 2
    assert loaded.orders == (order,)
    assert loaded.orders[0].created_at == order.created_at
    assert loaded.orders[0].updated_at == order.updated_at


def test_payload_is_camel_case_envelope(store, repo, order):
    repo.save(KEY, OrderCollection(next_sequence=2, orders=(order,)))
    payload = json.loads(store.get(KEY))

    assert payload["nextSequence"] == 2
    stored = payload["orders"][0]
    assert stored["orderNumber"] == "QP-2024-001"
    assert stored["doubleSided"] is True
    assert stored["status"] == "accepted"
    assert stored["createdAt"].startswith("2024-03-01T09:15:30")
    assert stored["totalCost"] == 120.5


def test_reads_legacy_list_payload(store, repo):
    store.set(
        KEY,
        json.dumps(
            [
                {
                    "id": "order_1",
                    "orderNumber": "QP-2024-001",
                    "fileName": "Assignment_Chapter_3.pdf",
                    "shopName": "QuickPrint Hub - CBIT",
                    "status": "pending",
                    "statusText": "Pending",
                    "pages": 12,
                    "totalCost": 45,
                    "createdAt": "2024-03-01T08:00:00.000Z",
                    "updatedAt": "2024-03-01T09:00:00.000Z",
                    "userId": "u1",
                }
            ]
        ),
    )

    loaded = repo.get(KEY)
    assert loaded.next_sequence == 2
    assert loaded.orders[0].order_number == "QP-2024-001"
    assert loaded.orders[0].created_at == datetime(2024, 3, 1, 8, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "payload",
    ["{not json", '{"orders": [{"id": "x"}]}', '[{"status": "lost"}]', "42"],
)
def test_corrupted_payload_raises(store, repo, payload):
    store.set(KEY, payload)
    with pytest.raises(PersistenceError):
        repo.get(KEY)


def test_ledger_append_is_newest_first(store, order):
    ledger = LedgerRecordStoreRepository(store)
    assert ledger.entries() == []

    second = order.model_copy(update={"id": "second"})
    ledger.append(order)
    ledger.append(second)

    assert [entry.id for entry in ledger.entries()] == ["second", order.id]
    assert json.loads(store.get(LEDGER_KEY))[0]["id"] == "second"
