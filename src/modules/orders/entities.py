"""Order entity and the serialized order collection.

``Order`` is an immutable value: every change produces a new instance
via ``with_status`` and the old one is left untouched for whoever still
holds it.  Field names serialize as camelCase (``orderNumber``,
``createdAt``) and timestamps as ISO-8601 strings.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from modules.identity.dtos import CustomerContactDTO
from modules.orders.constants import (
    DEFAULT_BINDING,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    OrderStatus,
    TransitionPolicy,
    status_label,
)
from modules.orders.dtos import Money


class Order(BaseModel):
    """One print job, from request to fulfilment.

    ``customer`` is the contact snapshot carried by partner-side copies;
    customer-side copies leave it empty.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    order_number: str
    file_name: str
    file_url: str = ""
    shop_name: str
    shop_email: str = ""
    college: str = ""
    pages: int = 1
    color: bool = False
    double_sided: bool = False
    copies: int = 1
    binding: str = DEFAULT_BINDING
    total_cost: Money = Decimal("0")
    customer_id: Optional[str] = None
    customer: Optional[CustomerContactDTO] = None
    status: OrderStatus = OrderStatus.PENDING
    status_text: str = OrderStatus.PENDING.label
    created_at: datetime
    updated_at: datetime

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def can_transition_to(
        self,
        new_status: str,
        policy: TransitionPolicy = TransitionPolicy.STRICT,
    ) -> bool:
        """Check ``new_status`` against the state machine.

        Re-applying the current status is always allowed.
        """
        if policy == TransitionPolicy.PERMISSIVE:
            return True
        if new_status == self.status:
            return True
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    def with_status(self, new_status: OrderStatus, at: datetime) -> Order:
        return self.model_copy(
            update={
                "status": new_status,
                "status_text": status_label(new_status),
                "updated_at": at,
            }
        )


class OrderCollection(BaseModel):
    """An actor's orders plus the counter for the next order number.

    Both travel in one payload so the counter is persisted in the same
    write as the order it labels.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    next_sequence: int = 1
    orders: Tuple[Order, ...] = ()

    @classmethod
    def from_legacy(cls, data: Any) -> Any:
        """Wrap a bare list of orders, the original payload shape."""
        if isinstance(data, list):
            return {"nextSequence": len(data) + 1, "orders": data}
        return data

    def find(self, order_id: str) -> Optional[Order]:
        return next((o for o in self.orders if o.id == order_id), None)

    def replace(self, order: Order) -> OrderCollection:
        orders = tuple(order if o.id == order.id else o for o in self.orders)
        return self.model_copy(update={"orders": orders})

    def prepend(self, order: Order, next_sequence: Optional[int] = None) -> OrderCollection:
        update: dict[str, Any] = {"orders": (order, *self.orders)}
        if next_sequence is not None:
            update["next_sequence"] = next_sequence
        return self.model_copy(update=update)
