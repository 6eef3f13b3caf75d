"""Order repository interfaces.

``IOrderRepository`` stores one actor's ``OrderCollection`` under that
actor's scope key.  ``ILedgerRepository`` is the cross-actor record of
every order ever placed, the only place a partner learns about new
orders addressed to their shop.

The Service Layer depends exclusively on these contracts (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.entities import Order, OrderCollection


class IOrderRepository(IRepository["OrderCollection"]):
    """Repository contract for an actor's order collection."""


class ILedgerRepository(IRepository[List["Order"]]):
    """Repository contract for the cross-actor order ledger."""

    @abstractmethod
    def entries(self) -> List[Order]:
        """All ledger entries, newest first (empty if none yet)."""

    @abstractmethod
    def append(self, order: Order) -> List[Order]:
        """Prepend ``order`` to the ledger and persist it."""
