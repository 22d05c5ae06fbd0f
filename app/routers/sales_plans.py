# app/routers/sales_plans.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from app.core.errors import NotFoundError
from app.database import get_db, transaction
from app.models.sales_plan import SalesPlan
from app.models.salesperson import Salesperson
from app.schemas.base import MessageResponse
from app.schemas.sales_plan import (
    SalesPlanCreate,
    SalesPlanUpdate,
    SalesPlanResponse,
    SalesPlanDetailResponse,
)
from app.services.lookups import apply_updates, get_or_404, require_existing

router = APIRouter(prefix="/salesPlan", tags=["Sales Plans"])


@router.get("", response_model=list[SalesPlanDetailResponse])
def list_sales_plans(
    salesperson_id: Optional[str] = Query(None, alias="salespersonId"),
    db: Session = Depends(get_db),
):
    query = db.query(SalesPlan).options(joinedload(SalesPlan.salesperson))

    if salesperson_id:
        query = query.filter(SalesPlan.salesperson_id == salesperson_id)

    return query.order_by(SalesPlan.id).all()


@router.get("/{plan_id}", response_model=SalesPlanDetailResponse)
def read_sales_plan(plan_id: int, db: Session = Depends(get_db)):
    plan = (
        db.query(SalesPlan)
        .options(joinedload(SalesPlan.salesperson))
        .filter(SalesPlan.id == plan_id)
        .first()
    )

    if not plan:
        raise NotFoundError("SalesPlan not found")

    return plan


@router.post("", response_model=SalesPlanResponse, status_code=status.HTTP_201_CREATED)
def create_sales_plan(plan_data: SalesPlanCreate, db: Session = Depends(get_db)):
    require_existing(db, Salesperson, plan_data.salesperson_id, "Salesperson does not exist")

    plan = SalesPlan(
        name=plan_data.name,
        description=plan_data.description,
        period=plan_data.period.value,
        salesperson_id=plan_data.salesperson_id,
    )

    with transaction(db):
        db.add(plan)

    db.refresh(plan)
    return plan


@router.patch("/{plan_id}", response_model=SalesPlanResponse)
def update_sales_plan(
    plan_id: int,
    plan_data: SalesPlanUpdate,
    db: Session = Depends(get_db),
):
    plan = get_or_404(db, SalesPlan, plan_id, "SalesPlan")

    if plan_data.salesperson_id is not None:
        require_existing(db, Salesperson, plan_data.salesperson_id, "Salesperson does not exist")

    with transaction(db):
        apply_updates(plan, plan_data)

    db.refresh(plan)
    return plan


@router.delete("/{plan_id}", response_model=MessageResponse)
def delete_sales_plan(plan_id: int, db: Session = Depends(get_db)):
    plan = get_or_404(db, SalesPlan, plan_id, "SalesPlan")

    with transaction(db):
        db.delete(plan)

    return {"message": "SalesPlan deleted successfully"}
