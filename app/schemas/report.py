# schemas/report.py

from datetime import datetime
from typing import List

from app.core.constants import ReportPeriod
from app.schemas.base import CamelModel
from app.schemas.order import OrderDetailResponse
from app.schemas.salesperson import SalespersonResponse


class ReportCreate(CamelModel):
    description: str | None = None
    period_type: ReportPeriod
    period_start: datetime
    salesperson_id: str


class ReportUpdate(CamelModel):
    description: str | None = None
    date: datetime | None = None
    salesperson_id: str | None = None


class ReportResponse(CamelModel):
    id: int
    description: str
    date: datetime
    salesperson_id: str
    period_type: ReportPeriod | None
    period_start: datetime | None
    period_end: datetime | None
    created_at: datetime
    updated_at: datetime


class ReportDetailResponse(ReportResponse):
    salesperson: SalespersonResponse


class ReportPeriodResponse(CamelModel):
    start: datetime
    end: datetime
    type: ReportPeriod


class ReportSummaryResponse(CamelModel):
    total_orders: int
    total_revenue: float
    average_order_value: float


class SalesReportResponse(CamelModel):
    salesperson: SalespersonResponse
    period: ReportPeriodResponse
    orders: List[OrderDetailResponse]
    summary: ReportSummaryResponse


class SavedSalesReportResponse(SalesReportResponse):
    report: ReportResponse


class SalespersonActivityResponse(CamelModel):
    reports: List[ReportDetailResponse]
    orders: List[OrderDetailResponse]
