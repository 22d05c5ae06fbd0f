from datetime import datetime

from app.schemas.base import CamelModel
from app.schemas.customer import CustomerResponse
from app.schemas.salesperson import SalespersonResponse


class StatementCreate(CamelModel):
    description: str
    date: datetime
    salesperson_id: str
    customer_id: str


class StatementUpdate(CamelModel):
    description: str | None = None
    date: datetime | None = None
    salesperson_id: str | None = None
    customer_id: str | None = None


class StatementResponse(CamelModel):
    id: int
    description: str
    date: datetime
    salesperson_id: str
    customer_id: str
    created_at: datetime
    updated_at: datetime


class StatementDetailResponse(StatementResponse):
    salesperson: SalespersonResponse
    customer: CustomerResponse
