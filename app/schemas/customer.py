from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class CustomerCreate(CamelModel):
    id: str = Field(..., pattern=r"^\d+$")
    id_type: str
    name: str
    address: str
    phone: str
    salesperson_id: str | None = Field(None, pattern=r"^\d+$")


class CustomerUpdate(CamelModel):
    id_type: str | None = None
    name: str | None = None
    address: str | None = None
    phone: str | None = None

    # Accepted only so the router can reject it; reassignment goes through
    # PATCH /customer/{id}/salesperson
    salesperson_id: str | None = None


class CustomerSalespersonUpdate(CamelModel):
    salesperson_id: str | None = None


class CustomerResponse(CamelModel):
    id: str
    id_type: str
    name: str
    address: str
    phone: str
    salesperson_id: str | None
    created_at: datetime
    updated_at: datetime
