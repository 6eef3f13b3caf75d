"""Order service layer (Use Cases).

Owns the acting actor's in-memory order projection and keeps it in step
with the record store: every mutation builds a new collection, persists
it as a whole under the actor's scope key, and only then replaces the
projection, so reads issued after a successful call see its result.

Business rules enforced:
- Only customers place orders; they start ``pending``.
- Order numbers come from a per-actor counter persisted with the order.
- Status changes are checked against the state machine (strict policy)
  or accepted as-is (permissive policy).
- Lookups never leave the actor's own collection.  The ledger is read
  only to import orders addressed to a partner's shop.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Optional, Type, TypeVar

import structlog
import uuid6
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.clock import utcnow
from modules.core.conf import EngineSettings
from modules.core.exceptions import AuthRequiredError, PersistenceError, ValidationError
from modules.identity.scopes import ScopeKeys
from modules.orders.constants import OrderStatus, format_order_number
from modules.orders.dtos import PrintSpecDTO, ShopSelectionDTO
from modules.orders.entities import Order, OrderCollection
from modules.orders.events import OrderCreated, OrderStatusChanged
from modules.orders.exceptions import InvalidOrderStatus, InvalidPartnerAction, OrderNotFound
from modules.orders.seeds import demo_orders

if TYPE_CHECKING:
    from modules.identity.dtos import Actor
    from modules.orders.repositories.interfaces import ILedgerRepository, IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)

DTO = TypeVar("DTO", bound=BaseModel)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories and the event bus via constructor injection.
    One instance serves exactly one actor.
    """

    def __init__(
        self,
        actor: Optional[Actor],
        order_repository: IOrderRepository,
        ledger_repository: ILedgerRepository,
        event_bus: IEventBus,
        settings: Optional[EngineSettings] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._actor = actor
        self._keys = ScopeKeys.for_actor(actor) if actor else None
        self._order_repo = order_repository
        self._ledger_repo = ledger_repository
        self._event_bus = event_bus
        self._settings = settings or EngineSettings()
        self._clock = clock
        self._collection: Optional[OrderCollection] = None
        self.seeded = False

    # ------------------------------------------------------------------
    # Hydration
    # ------------------------------------------------------------------

    def load_orders(self) -> List[Order]:
        """(Re)load the actor's collection from the record store.

        An absent collection becomes the demo dataset when seeding is
        enabled, and an empty collection otherwise.

        Raises:
            AuthRequiredError: no actor.
            PersistenceError: the stored payload is unreadable.
        """
        actor = self._require_actor()
        log = logger.bind(actor_scope=self._keys.actor_key)

        collection = self._order_repo.get(self._keys.orders)
        if collection is None and self._settings.seed_demo_data:
            collection = demo_orders(actor, self._clock(), self._settings.default_college)
            self._order_repo.save(self._keys.orders, collection)
            self.seeded = True
            log.info("order.demo_seeded", order_count=len(collection.orders))

        self._collection = collection if collection is not None else OrderCollection()
        log.info("order.collection_loaded", order_count=len(self._collection.orders))
        return list(self._collection.orders)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, print_spec: Any, shop_selection: Any) -> Order:
        """Place a new ``pending`` order for the current customer.

        Steps:
        1. Validate the actor, the print specification and the shop.
        2. Label the order with the next number from the actor's counter.
        3. Persist collection and counter in one write.
        4. Record the order, with the customer's contact, in the ledger.
           If that fails, the previous collection is written back, so a
           failed call leaves neither the order nor a spent number.
        5. Publish ``OrderCreated``.

        Raises:
            AuthRequiredError: no actor.
            InvalidPartnerAction: the actor is a partner.
            ValidationError: missing or invalid print spec / shop selection.
            PersistenceError: the collection or ledger could not be written.
        """
        actor = self._require_actor()
        if actor.is_partner:
            raise InvalidPartnerAction("Only customers can place orders.")

        spec = self._validate(PrintSpecDTO, print_spec, "Print specification")
        shop = self._validate(ShopSelectionDTO, shop_selection, "Shop selection")

        log = logger.bind(actor_scope=self._keys.actor_key)
        log.info("order.creation_started", shop_name=shop.shop_name)

        collection = self._current()
        sequence = collection.next_sequence
        now = self._clock()
        order = Order(
            id=str(uuid6.uuid7()),
            order_number=format_order_number(self._settings.order_number_prefix, sequence),
            file_name=spec.file_name,
            file_url=spec.file_url,
            shop_name=shop.shop_name,
            shop_email=shop.shop_email,
            college=actor.college or self._settings.default_college,
            pages=spec.pages,
            color=spec.color,
            double_sided=spec.double_sided,
            copies=spec.copies,
            binding=spec.binding,
            total_cost=spec.total_cost,
            customer_id=actor.id,
            status=OrderStatus.PENDING,
            status_text=OrderStatus.PENDING.label,
            created_at=now,
            updated_at=now,
        )

        updated = collection.prepend(order, next_sequence=sequence + 1)
        self._order_repo.save(self._keys.orders, updated)
        try:
            self._ledger_repo.append(order.model_copy(update={"customer": actor.contact()}))
        except PersistenceError:
            log.error("order.ledger_append_failed", order_id=order.id)
            self._order_repo.save(self._keys.orders, collection)
            raise
        self._collection = updated

        log.info("order.created", order_id=order.id, order_number=order.order_number)
        self._event_bus.publish(
            OrderCreated(
                aggregate_id=order.id,
                actor_scope=self._keys.actor_key,
                actor_role=actor.role.value,
                order_number=order.order_number,
                shop_name=order.shop_name,
            )
        )
        return order

    def update_order_status(self, order_id: str, new_status: Any) -> Order:
        """Move one of the actor's orders to ``new_status``.

        Only the actor's own copy changes; the other side's copy of the
        same order is untouched.

        Raises:
            AuthRequiredError: no actor.
            ValidationError: missing order id.
            InvalidOrderStatus: unknown status or forbidden transition.
            OrderNotFound: the id is not in the actor's collection.
            PersistenceError: the collection could not be written.
        """
        actor = self._require_actor()
        if not order_id:
            raise ValidationError("Order id is required.")
        status = self._parse_status(new_status)

        collection = self._current()
        order = collection.find(order_id)

        log = logger.bind(
            actor_scope=self._keys.actor_key,
            order_id=order_id,
            new_status=status.value,
        )

        if order is None:
            log.warning("order.not_found")
            raise OrderNotFound(f"Order {order_id} not found.")

        if not order.can_transition_to(status, self._settings.transition_policy):
            log.warning("order.invalid_transition", current_status=order.status.value)
            raise InvalidOrderStatus(
                f"Cannot transition from {order.status.value} to {status.value}."
            )

        updated_order = order.with_status(status, self._clock())
        updated = collection.replace(updated_order)
        self._order_repo.save(self._keys.orders, updated)
        self._collection = updated

        log.info("order.status_updated", old_status=order.status.value)
        self._event_bus.publish(
            OrderStatusChanged(
                aggregate_id=order.id,
                actor_scope=self._keys.actor_key,
                actor_role=actor.role.value,
                order_number=order.order_number,
                old_status=order.status.value,
                new_status=status.value,
            )
        )
        return updated_order

    def import_shop_orders(self) -> List[Order]:
        """Copy ledger entries addressed to the partner's shop into their collection.

        Orders the partner already holds are skipped, never refreshed:
        the two sides keep independent copies once imported.

        Raises:
            AuthRequiredError: no actor.
            InvalidPartnerAction: the actor is a customer.
        """
        actor = self._require_actor()
        if not actor.is_partner:
            raise InvalidPartnerAction("Only partners can import shop orders.")

        collection = self._current()
        held = {order.id for order in collection.orders}
        shop_email = actor.email.lower()
        incoming = [
            entry
            for entry in self._ledger_repo.entries()
            if entry.shop_email.lower() == shop_email and entry.id not in held
        ]
        if not incoming:
            return []

        updated = collection.model_copy(
            update={"orders": (*incoming, *collection.orders)}
        )
        self._order_repo.save(self._keys.orders, updated)
        self._collection = updated

        logger.info(
            "order.shop_orders_imported",
            actor_scope=self._keys.actor_key,
            imported=len(incoming),
        )
        return incoming

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self) -> Iterator[Order]:
        """The actor's orders, newest first by ``created_at``.

        Each call returns a fresh iterator over a snapshot taken at call
        time, so later mutations never show up in an iterator already
        handed out.
        """
        self._require_actor()
        snapshot = sorted(self._current().orders, key=lambda o: o.created_at, reverse=True)
        return (order for order in snapshot)

    def get_order(self, order_id: str) -> Order:
        """Retrieve one of the actor's orders.

        Raises:
            OrderNotFound: if the order is not in the actor's collection.
        """
        self._require_actor()
        order = self._current().find(order_id)
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_actor(self) -> Actor:
        if self._actor is None:
            raise AuthRequiredError("Sign in to manage orders.")
        return self._actor

    def _current(self) -> OrderCollection:
        if self._collection is None:
            self.load_orders()
        return self._collection

    @staticmethod
    def _parse_status(value: Any) -> OrderStatus:
        if value is None or value == "":
            raise ValidationError("New status is required.")
        try:
            return OrderStatus(value)
        except ValueError as exc:
            raise InvalidOrderStatus(f"Unknown order status {value!r}.") from exc

    @staticmethod
    def _validate(dto_class: Type[DTO], value: Any, label: str) -> DTO:
        if value is None:
            raise ValidationError(f"{label} is required.")
        if isinstance(value, dto_class):
            return value
        try:
            return dto_class.model_validate(value)
        except PydanticValidationError as exc:
            raise ValidationError(f"{label} is invalid: {exc}") from exc
