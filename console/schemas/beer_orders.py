from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .base import CamelModel
from .beers import BeerRead


class BeerOrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class BeerReference(BaseModel):
    kind: Literal["reference"] = "reference"
    beer_id: int

    @property
    def display_name(self) -> str:
        return f"Beer #{self.beer_id}"


class HydratedBeer(BaseModel):
    kind: Literal["hydrated"] = "hydrated"
    beer: BeerRead

    @property
    def beer_id(self) -> int:
        return self.beer.id

    @property
    def display_name(self) -> str:
        return self.beer.beer_name


LineBeer = Union[BeerReference, HydratedBeer]


class BeerOrderLineRead(CamelModel):
    id: Optional[int] = None
    version: Optional[int] = None
    beer_id: int
    beer: Optional[BeerRead] = None
    order_quantity: int
    quantity_allocated: Optional[int] = None
    status: Optional[str] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None

    @property
    def beer_ref(self) -> LineBeer:
        if self.beer is not None:
            return HydratedBeer(beer=self.beer)
        return BeerReference(beer_id=self.beer_id)


class BeerOrderRead(CamelModel):
    id: int
    version: Optional[int] = None
    customer_ref: str
    payment_amount: Optional[Decimal] = None
    # kept as a plain string so a status added server-side does not break reads
    status: Optional[str] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    beer_order_lines: List[BeerOrderLineRead] = []


class OrderLineCommand(CamelModel):
    beer_id: int
    order_quantity: int = Field(ge=1)


class CreateBeerOrderCommand(CamelModel):
    customer_ref: str
    order_lines: List[OrderLineCommand] = Field(min_length=1)


class BeerOrderStatusUpdate(CamelModel):
    status: BeerOrderStatus


# Console side: what the order form posts

class DraftLineIn(CamelModel):
    beer_id: Optional[int] = None
    order_quantity: int = 1


class OrderDraftIn(CamelModel):
    customer_ref: str = ""
    order_lines: List[DraftLineIn] = []
