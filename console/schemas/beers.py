from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from .base import CamelModel


class BeerBase(CamelModel):
    beer_name: str
    beer_style: str
    upc: str
    quantity_on_hand: int
    price: Decimal

    @field_serializer("price", when_used="json")
    def _price_as_number(self, v: Decimal) -> float:
        return float(v)


class BeerRead(BeerBase):
    id: int
    version: Optional[int] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None


class BeerCreate(BeerBase):
    quantity_on_hand: int = Field(ge=0)
    price: Decimal = Field(ge=0)

    @field_validator("beer_name", "beer_style", "upc")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class BeerUpdate(BeerCreate):
    version: Optional[int]

    @classmethod
    def from_read(cls, beer: BeerRead, **changes) -> "BeerUpdate":
        data = beer.model_dump(include=set(BeerBase.model_fields))
        data.update(changes)
        # token is echoed from the observed entity, never taken from changes
        data["version"] = beer.version
        return cls(**data)
