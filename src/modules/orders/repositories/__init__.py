"""Order repositories package."""

from modules.orders.repositories.interfaces import ILedgerRepository, IOrderRepository
from modules.orders.repositories.record_store import (
    LedgerRecordStoreRepository,
    OrderRecordStoreRepository,
)

__all__ = [
    "ILedgerRepository",
    "IOrderRepository",
    "LedgerRecordStoreRepository",
    "OrderRecordStoreRepository",
]
