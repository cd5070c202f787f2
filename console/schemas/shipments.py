from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import CamelModel


class ShipmentBase(CamelModel):
    shipment_date: datetime
    carrier: str
    tracking_number: str


class ShipmentRead(ShipmentBase):
    id: int
    version: Optional[int] = None
    beer_order_id: int
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None


class ShipmentUpdate(ShipmentBase):
    """Editable shipment fields. The order link is fixed once the shipment exists."""

    @field_validator("carrier", "tracking_number")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class ShipmentCreate(ShipmentUpdate):
    beer_order_id: int
