"""Record-store implementations of the order repositories."""

from __future__ import annotations

from typing import Any, List

import structlog
from pydantic import TypeAdapter

from modules.core.repositories.record_store import RecordStoreRepository
from modules.identity.constants import LEDGER_KEY
from modules.orders.entities import Order, OrderCollection
from modules.orders.repositories.interfaces import ILedgerRepository, IOrderRepository

logger = structlog.get_logger(__name__)


class OrderRecordStoreRepository(RecordStoreRepository[OrderCollection], IOrderRepository):
    """Stores ``{"nextSequence": n, "orders": [...]}`` per actor scope key."""

    adapter = TypeAdapter(OrderCollection)

    def _coerce(self, data: Any) -> Any:
        return OrderCollection.from_legacy(data)

    def save(self, key: str, collection: OrderCollection) -> OrderCollection:
        super().save(key, collection)
        logger.info(
            "order.collection_saved",
            scope_key=key,
            order_count=len(collection.orders),
            next_sequence=collection.next_sequence,
        )
        return collection


class LedgerRecordStoreRepository(RecordStoreRepository[List[Order]], ILedgerRepository):
    """Stores the ledger as a bare list under ``all_orders``."""

    adapter = TypeAdapter(List[Order])

    def entries(self) -> List[Order]:
        return self.get(LEDGER_KEY) or []

    def append(self, order: Order) -> List[Order]:
        ledger = [order, *self.entries()]
        self.save(LEDGER_KEY, ledger)
        logger.info("order.ledger_appended", order_id=order.id, ledger_size=len(ledger))
        return ledger
