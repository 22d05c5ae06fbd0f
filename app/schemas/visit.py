from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class VisitCreate(CamelModel):
    date: datetime
    comments: str
    customer_id: str = Field(..., pattern=r"^\d+$")
    salesperson_id: str = Field(..., pattern=r"^\d+$")


class VisitUpdate(CamelModel):
    date: datetime | None = None
    comments: str | None = None
    customer_id: str | None = Field(None, pattern=r"^\d+$")
    salesperson_id: str | None = Field(None, pattern=r"^\d+$")


class VisitResponse(CamelModel):
    id: int
    date: datetime
    comments: str
    customer_id: str
    salesperson_id: str
    created_at: datetime
    updated_at: datetime
