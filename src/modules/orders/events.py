"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderCreated(DomainEvent):
    """Raised when a customer places an order."""

    actor_scope: str
    actor_role: str
    order_number: str
    shop_name: str


@dataclass(frozen=True, kw_only=True)
class OrderStatusChanged(DomainEvent):
    """Raised when either side changes an order's status."""

    actor_scope: str
    actor_role: str
    order_number: str
    new_status: str
    old_status: Optional[str] = None
