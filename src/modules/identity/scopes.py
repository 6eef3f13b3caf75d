"""Scope keys partitioning every collection by actor and kind."""

from __future__ import annotations

from dataclasses import dataclass

from modules.identity.constants import ActorRole
from modules.identity.dtos import Actor


@dataclass(frozen=True)
class ScopeKeys:
    """Deterministic record store keys for one actor."""

    actor_key: str
    orders: str
    notifications: str

    @classmethod
    def for_actor(cls, actor: Actor) -> ScopeKeys:
        if actor.role == ActorRole.PARTNER:
            return cls(
                actor_key=actor.email,
                orders=f"partner_orders_{actor.email}",
                notifications=f"partner_notifications_{actor.email}",
            )
        return cls(
            actor_key=actor.id,
            orders=f"orders_{actor.id}",
            notifications=f"notifications_{actor.id}",
        )
