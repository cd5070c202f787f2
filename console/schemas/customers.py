from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import CamelModel


class CustomerBase(CamelModel):
    name: str
    email: str
    phone_number: str
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    state: str
    postal_code: str


class CustomerRead(CustomerBase):
    id: int
    version: Optional[int] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None


class CustomerCreate(CustomerBase):
    @field_validator("name", "email", "phone_number", "address_line1", "city", "state", "postal_code")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v

    @field_validator("address_line2")
    @classmethod
    def _optional_line(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class CustomerUpdate(CustomerCreate):
    version: Optional[int]

    @classmethod
    def from_read(cls, customer: CustomerRead, **changes) -> "CustomerUpdate":
        data = customer.model_dump(include=set(CustomerBase.model_fields))
        data.update(changes)
        data["version"] = customer.version
        return cls(**data)
