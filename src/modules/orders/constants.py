"""Order domain constants.

Defines status choices, their display labels and valid status
transitions for the order state machine.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    ACCEPTED = "accepted", "Accepted"
    PRINTING = "printing", "Printing"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


class TransitionPolicy(models.TextChoices):
    STRICT = "strict", "Legal transitions only"
    PERMISSIVE = "permissive", "Any status from any state"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PENDING: {OrderStatus.ACCEPTED, OrderStatus.CANCELLED},
    OrderStatus.ACCEPTED: {OrderStatus.PRINTING, OrderStatus.CANCELLED},
    OrderStatus.PRINTING: {OrderStatus.COMPLETED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.COMPLETED, OrderStatus.CANCELLED}

DEFAULT_ORDER_NUMBER_PREFIX = "QP-2024-"
ORDER_NUMBER_WIDTH = 3

DEFAULT_BINDING = "No Binding"


def status_label(status: str) -> str:
    """Display label for ``status``; unknown values are shown as-is."""
    try:
        return OrderStatus(status).label
    except ValueError:
        return str(status)


def format_order_number(prefix: str, sequence: int) -> str:
    return f"{prefix}{sequence:0{ORDER_NUMBER_WIDTH}d}"
