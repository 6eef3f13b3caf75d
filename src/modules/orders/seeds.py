"""Demo dataset written on first hydration when seeding is enabled.

Customers get two orders placed with two different shops, one pending
and one accepted.  Partners get two incoming orders from students with
their contact snapshot filled in.  Times are relative to ``now`` so the
demo always looks recent.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import uuid6

from modules.identity.dtos import Actor, CustomerContactDTO
from modules.orders.constants import OrderStatus, status_label
from modules.orders.entities import Order, OrderCollection


def _order(now: datetime, created_ago: timedelta, updated_ago: timedelta, **fields) -> Order:
    status = fields.pop("status", OrderStatus.PENDING)
    return Order(
        id=str(uuid6.uuid7()),
        status=status,
        status_text=status_label(status),
        created_at=now - created_ago,
        updated_at=now - updated_ago,
        **fields,
    )


def customer_demo_orders(actor: Actor, now: datetime, college: str) -> OrderCollection:
    college = actor.college or college
    orders = (
        _order(
            now,
            timedelta(hours=2),
            timedelta(hours=1),
            order_number="QP-2024-001",
            file_name="Assignment_Chapter_3.pdf",
            file_url="https://example.com/uploads/Assignment_Chapter_3.pdf",
            shop_name="QuickPrint Hub - CBIT",
            shop_email="quickprint.hub@example.com",
            college=college,
            pages=12,
            binding="Stapled",
            total_cost=Decimal("45"),
            customer_id=actor.id,
        ),
        _order(
            now,
            timedelta(hours=24),
            timedelta(hours=12),
            order_number="QP-2024-002",
            file_name="Research_Paper_Final.pdf",
            file_url="https://example.com/uploads/Research_Paper_Final.pdf",
            shop_name="Print Express - JNTU",
            shop_email="print.express@example.com",
            status=OrderStatus.ACCEPTED,
            college=college,
            pages=25,
            color=True,
            double_sided=True,
            binding="Spiral Bound",
            total_cost=Decimal("120"),
            customer_id=actor.id,
        ),
    )
    return OrderCollection(next_sequence=len(orders) + 1, orders=orders)


def partner_demo_orders(actor: Actor, now: datetime, college: str) -> OrderCollection:
    college = actor.college or college
    shop_name = actor.name or "My Shop"
    orders = (
        _order(
            now,
            timedelta(hours=1),
            timedelta(minutes=30),
            order_number="QP-2024-P01",
            file_name="Student_Assignment.pdf",
            shop_name=shop_name,
            shop_email=actor.email,
            college=college,
            pages=10,
            copies=2,
            total_cost=Decimal("30"),
            customer=CustomerContactDTO(
                name="Student User", phone="9876543210", email="student@cbit.ac.in"
            ),
        ),
        _order(
            now,
            timedelta(hours=3),
            timedelta(hours=2),
            order_number="QP-2024-P02",
            file_name="Project_Report.pdf",
            shop_name=shop_name,
            shop_email=actor.email,
            status=OrderStatus.ACCEPTED,
            college=college,
            pages=45,
            color=True,
            double_sided=True,
            binding="Spiral Bound",
            total_cost=Decimal("180"),
            customer=CustomerContactDTO(
                name="Another Student", phone="9876543211", email="another@cbit.ac.in"
            ),
        ),
    )
    return OrderCollection(next_sequence=len(orders) + 1, orders=orders)


def demo_orders(actor: Actor, now: datetime, college: str) -> OrderCollection:
    if actor.is_partner:
        return partner_demo_orders(actor, now, college)
    return customer_demo_orders(actor, now, college)
