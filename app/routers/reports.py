# =========================================================
# REPORTS ROUTER
#
# Sales rollup for one salesperson over a calendar window:
# - monthly      -> [start, start + 1 month)
# - quarterly    -> [start, start + 3 months)
# - semiannually -> [start, start + 6 months)
#
# GET computes on the fly, POST also stores a Report row.
# =========================================================

import logging
from calendar import monthrange
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from app.core.constants import REPORT_PERIOD_MONTHS, ReportPeriod
from app.core.errors import NotFoundError, ValidationError
from app.database import get_db, transaction
from app.models.orders import Order
from app.models.report import Report
from app.models.salesperson import Salesperson
from app.schemas.base import MessageResponse
from app.schemas.report import (
    ReportCreate,
    ReportUpdate,
    ReportDetailResponse,
    ReportResponse,
    SalesReportResponse,
    SavedSalesReportResponse,
    SalespersonActivityResponse,
)
from app.services.lookups import apply_updates, get_or_404, require_existing
from app.services.orders import order_query

logger = logging.getLogger("app")

router = APIRouter(prefix="/report", tags=["Reports"])


def add_months(start: datetime, months: int) -> datetime:
    """Same day-of-month `months` later, clamped to the target month's length."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, monthrange(year, month)[1])

    return start.replace(year=year, month=month, day=day)


def as_utc(value: datetime) -> datetime:
    """Aware UTC datetime; naive input is taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =========================================================
# CORE SALES ROLLUP
# =========================================================
def _calculate_report(
    db: Session,
    salesperson: Salesperson,
    period_type: ReportPeriod,
    period_start: datetime,
):
    start = as_utc(period_start)
    end = add_months(start, REPORT_PERIOD_MONTHS[period_type])

    orders = (
        order_query(db)
        .filter(
            Order.salesperson_id == salesperson.id,
            Order.created_at >= start,
            Order.created_at < end,
        )
        .order_by(Order.created_at, Order.id)
        .all()
    )

    total_revenue = sum((Decimal(order.total) for order in orders), Decimal("0.00"))

    if orders:
        average_order_value = (total_revenue / len(orders)).quantize(Decimal("0.01"))
    else:
        average_order_value = Decimal("0.00")

    return {
        "salesperson": salesperson,
        "period": {"start": start, "end": end, "type": period_type},
        "orders": orders,
        "summary": {
            "total_orders": len(orders),
            "total_revenue": total_revenue,
            "average_order_value": average_order_value,
        },
    }


def _report_query(db: Session):
    return db.query(Report).options(joinedload(Report.salesperson))


# =========================================================
# ON-DEMAND REPORT
# =========================================================
@router.get("", response_model=SalesReportResponse)
def sales_report(
    salesperson_id: Optional[str] = Query(None, alias="salespersonId"),
    period_type: Optional[str] = Query(None, alias="periodType"),
    period_start: Optional[str] = Query(None, alias="periodStart"),
    db: Session = Depends(get_db),
):
    if not salesperson_id or not period_type or not period_start:
        raise ValidationError(
            "Missing required query parameters",
            cause="salespersonId, periodType and periodStart are required",
        )

    try:
        period = ReportPeriod(period_type)
    except ValueError:
        raise ValidationError(
            "Invalid periodType",
            cause=f"Expected one of: {', '.join(p.value for p in ReportPeriod)}",
        )

    try:
        start = datetime.fromisoformat(period_start)
    except ValueError:
        raise ValidationError("Invalid periodStart", cause="Expected an ISO 8601 date")

    salesperson = get_or_404(db, Salesperson, salesperson_id, "Salesperson")

    return _calculate_report(db, salesperson, period, start)


# =========================================================
# SAVED REPORTS
# =========================================================
@router.post("", response_model=SavedSalesReportResponse, status_code=status.HTTP_201_CREATED)
def create_report(report_data: ReportCreate, db: Session = Depends(get_db)):
    salesperson = get_or_404(db, Salesperson, report_data.salesperson_id, "Salesperson")

    result = _calculate_report(db, salesperson, report_data.period_type, report_data.period_start)

    report = Report(
        description=report_data.description or f"{report_data.period_type.value} sales report",
        date=datetime.now(timezone.utc).replace(tzinfo=None),
        salesperson_id=salesperson.id,
        period_type=report_data.period_type.value,
        period_start=result["period"]["start"],
        period_end=result["period"]["end"],
    )

    with transaction(db):
        db.add(report)

    db.refresh(report)
    logger.info(
        f"Report {report.id} saved: salesperson={salesperson.id} "
        f"type={report.period_type} orders={result['summary']['total_orders']}"
    )

    result["report"] = report
    return result


@router.get("/all", response_model=list[ReportDetailResponse])
def list_reports(db: Session = Depends(get_db)):
    return _report_query(db).order_by(Report.date.desc(), Report.id.desc()).all()


@router.get("/salesperson/{salesperson_id}", response_model=SalespersonActivityResponse)
def salesperson_activity(salesperson_id: str, db: Session = Depends(get_db)):
    get_or_404(db, Salesperson, salesperson_id, "Salesperson")

    reports = (
        _report_query(db)
        .filter(Report.salesperson_id == salesperson_id)
        .order_by(Report.date.desc(), Report.id.desc())
        .all()
    )

    orders = (
        order_query(db)
        .filter(Order.salesperson_id == salesperson_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )

    return {"reports": reports, "orders": orders}


@router.get("/{report_id}", response_model=ReportDetailResponse)
def read_report(report_id: int, db: Session = Depends(get_db)):
    report = _report_query(db).filter(Report.id == report_id).first()

    if not report:
        raise NotFoundError("Report not found")

    return report


@router.patch("/{report_id}", response_model=ReportResponse)
def update_report(
    report_id: int,
    report_data: ReportUpdate,
    db: Session = Depends(get_db),
):
    report = get_or_404(db, Report, report_id, "Report")

    if report_data.salesperson_id is not None:
        require_existing(db, Salesperson, report_data.salesperson_id, "Salesperson does not exist")

    with transaction(db):
        apply_updates(report, report_data)

    db.refresh(report)
    return report


@router.delete("/{report_id}", response_model=MessageResponse)
def delete_report(report_id: int, db: Session = Depends(get_db)):
    report = get_or_404(db, Report, report_id, "Report")

    with transaction(db):
        db.delete(report)

    return {"message": "Report deleted successfully"}
