"""Order DTOs for the Service Layer.

Framework-agnostic input contracts using Pydantic v2, immutable
(``frozen=True``).  Both accept snake_case or the camelCase names the
print wizard and shop selector emit.

- ``PrintSpecDTO``: the opaque print job specification.
- ``ShopSelectionDTO``: the shop the customer picked.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from modules.orders.constants import DEFAULT_BINDING


def _money_to_json(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Amounts stay exact in Python and are written as JSON numbers.
Money = Annotated[Decimal, PlainSerializer(_money_to_json, when_used="json")]


class PrintSpecDTO(BaseModel):
    """Print job specification, consumed verbatim by order creation."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    file_name: str = "Document.pdf"
    file_url: str = ""
    pages: int = 1
    color: bool = False
    double_sided: bool = False
    copies: int = 1
    binding: str = DEFAULT_BINDING
    total_cost: Money = Decimal("0")

    @field_validator("pages", "copies")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Pages and copies must be at least 1.")
        return v

    @field_validator("total_cost")
    @classmethod
    def cost_not_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Total cost cannot be negative.")
        return v


class ShopSelectionDTO(BaseModel):
    """The shop an order is placed with."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    shop_name: str
    shop_email: str

    @field_validator("shop_name", "shop_email")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Shop name and email are required.")
        return v.strip()
