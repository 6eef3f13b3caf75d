"""Actor DTOs.

The identity provider hands the engines an ``Actor``; nothing else about
authentication is visible to them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from modules.identity.constants import ActorRole


class CustomerContactDTO(BaseModel):
    """Contact snapshot copied onto partner-side orders."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    phone: str = ""
    email: str = ""


class Actor(BaseModel):
    """The current session identity.

    Partners are scoped by e-mail, so a partner without one is rejected.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    role: ActorRole
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    college: Optional[str] = None

    @model_validator(mode="after")
    def partner_requires_email(self):
        if self.role == ActorRole.PARTNER and not self.email:
            raise ValueError("Partner actors must have an email.")
        return self

    @property
    def is_partner(self) -> bool:
        return self.role == ActorRole.PARTNER

    def contact(self) -> CustomerContactDTO:
        return CustomerContactDTO(
            name=self.name or "",
            phone=self.phone or "",
            email=self.email or "",
        )
