"""Identity provider contract and local implementations.

The engines only ever ask "who is the current actor?".  Login flows
(OTP, college e-mail, Google) live in the authentication layer, which
ends by calling ``login`` with the resolved ``Actor``.
"""

from __future__ import annotations

from typing import Optional, Protocol

import structlog

from modules.identity.dtos import Actor

logger = structlog.get_logger(__name__)


class IIdentityProvider(Protocol):
    """Supplies the current actor, or ``None`` when nobody is signed in."""

    def current_actor(self) -> Optional[Actor]: ...


class StaticIdentityProvider:
    """Always returns the same actor."""

    def __init__(self, actor: Optional[Actor]) -> None:
        self._actor = actor

    def current_actor(self) -> Optional[Actor]:
        return self._actor


class InMemoryIdentityProvider:
    """Session holder with explicit login and logout."""

    def __init__(self) -> None:
        self._actor: Optional[Actor] = None

    def current_actor(self) -> Optional[Actor]:
        return self._actor

    def login(self, actor: Actor) -> Actor:
        self._actor = actor
        logger.info("identity.logged_in", actor_id=actor.id, role=actor.role.value)
        return actor

    def logout(self) -> None:
        if self._actor is not None:
            logger.info("identity.logged_out", actor_id=self._actor.id)
        self._actor = None
