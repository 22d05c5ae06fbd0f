# app/routers/visits.py

from datetime import date, datetime, timedelta

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.database import get_db, transaction
from app.models.customer import Customer
from app.models.salesperson import Salesperson
from app.models.visit import Visit
from app.schemas.base import MessageResponse
from app.schemas.visit import VisitCreate, VisitUpdate, VisitResponse
from app.services.lookups import apply_updates, get_or_404, require_existing

router = APIRouter(prefix="/visit", tags=["Visits"])


def _check_salesperson_id(salesperson_id: str):
    if not salesperson_id.isdigit():
        raise ValidationError("Invalid salesperson ID")


@router.get("", response_model=list[VisitResponse])
def list_visits(db: Session = Depends(get_db)):
    return db.query(Visit).order_by(Visit.date.desc(), Visit.id.desc()).all()


@router.get("/salesperson/{salesperson_id}", response_model=list[VisitResponse])
def list_salesperson_visits(salesperson_id: str, db: Session = Depends(get_db)):
    _check_salesperson_id(salesperson_id)

    return (
        db.query(Visit)
        .filter(Visit.salesperson_id == salesperson_id)
        .order_by(Visit.date.desc(), Visit.id.desc())
        .all()
    )


@router.get("/salesperson/{salesperson_id}/date/{visit_date}", response_model=list[VisitResponse])
def list_salesperson_visits_on_date(
    salesperson_id: str,
    visit_date: str,
    db: Session = Depends(get_db),
):
    _check_salesperson_id(salesperson_id)

    try:
        day = date.fromisoformat(visit_date)
    except ValueError:
        raise ValidationError("Invalid date format", cause="Expected YYYY-MM-DD")

    start = datetime.combine(day, datetime.min.time())
    end = start + timedelta(days=1)

    return (
        db.query(Visit)
        .filter(
            Visit.salesperson_id == salesperson_id,
            Visit.date >= start,
            Visit.date < end,
        )
        .order_by(Visit.date, Visit.id)
        .all()
    )


@router.get("/{visit_id}", response_model=VisitResponse)
def read_visit(visit_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Visit, visit_id, "Visit")


@router.post("", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
def create_visit(visit_data: VisitCreate, db: Session = Depends(get_db)):
    require_existing(db, Customer, visit_data.customer_id, "Customer does not exist")
    require_existing(db, Salesperson, visit_data.salesperson_id, "Salesperson does not exist")

    visit = Visit(**visit_data.model_dump())

    with transaction(db):
        db.add(visit)

    db.refresh(visit)
    return visit


@router.put("/{visit_id}", response_model=VisitResponse)
def update_visit(
    visit_id: int,
    visit_data: VisitUpdate,
    db: Session = Depends(get_db),
):
    visit = get_or_404(db, Visit, visit_id, "Visit")

    if visit_data.customer_id is not None:
        require_existing(db, Customer, visit_data.customer_id, "Customer does not exist")
    if visit_data.salesperson_id is not None:
        require_existing(db, Salesperson, visit_data.salesperson_id, "Salesperson does not exist")

    with transaction(db):
        apply_updates(visit, visit_data)

    db.refresh(visit)
    return visit


@router.delete("/{visit_id}", response_model=MessageResponse)
def delete_visit(visit_id: int, db: Session = Depends(get_db)):
    visit = get_or_404(db, Visit, visit_id, "Visit")

    with transaction(db):
        db.delete(visit)

    return {"message": "Visit deleted successfully"}
