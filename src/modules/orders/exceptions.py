"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
View adapters catch these and translate them into user-facing
messages.
"""

from __future__ import annotations

from modules.core.exceptions import NotFoundError, ValidationError


class OrderNotFound(NotFoundError):
    """The order is not in the acting actor's own collection."""


class InvalidOrderStatus(ValidationError):
    """Unknown status value, or a transition the state machine forbids."""


class InvalidPartnerAction(ValidationError):
    """The operation is not available to the acting actor's role."""
