from datetime import datetime

from app.core.constants import PlanPeriod
from app.schemas.base import CamelModel
from app.schemas.salesperson import SalespersonResponse


class SalesPlanCreate(CamelModel):
    name: str
    description: str
    period: PlanPeriod
    salesperson_id: str


class SalesPlanUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    period: PlanPeriod | None = None
    salesperson_id: str | None = None


class SalesPlanResponse(CamelModel):
    id: int
    name: str
    description: str
    period: PlanPeriod
    salesperson_id: str
    created_at: datetime
    updated_at: datetime


class SalesPlanDetailResponse(SalesPlanResponse):
    salesperson: SalespersonResponse
