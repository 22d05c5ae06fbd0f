# app/routers/salespeople.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.errors import BusinessRuleViolation
from app.database import get_db, transaction
from app.models.salesperson import Salesperson
from app.schemas.base import MessageResponse
from app.schemas.salesperson import SalespersonCreate, SalespersonUpdate, SalespersonResponse
from app.services.lookups import apply_updates, get_or_404

logger = logging.getLogger("app")

router = APIRouter(prefix="/salesperson", tags=["Salespeople"])


def _ensure_email_free(db: Session, email: str, salesperson_id: str | None = None):
    query = db.query(Salesperson).filter(Salesperson.email == email)

    if salesperson_id is not None:
        query = query.filter(Salesperson.id != salesperson_id)

    if query.first():
        raise BusinessRuleViolation("Email already in use")


@router.get("", response_model=list[SalespersonResponse])
def list_salespeople(db: Session = Depends(get_db)):
    return db.query(Salesperson).order_by(Salesperson.name).all()


@router.get("/{salesperson_id}", response_model=SalespersonResponse)
def read_salesperson(salesperson_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Salesperson, salesperson_id, "Salesperson")


@router.post("", response_model=SalespersonResponse, status_code=status.HTTP_201_CREATED)
def create_salesperson(
    salesperson_data: SalespersonCreate,
    db: Session = Depends(get_db),
):
    if db.get(Salesperson, salesperson_data.id):
        raise BusinessRuleViolation("Salesperson already exists")

    _ensure_email_free(db, salesperson_data.email)

    salesperson = Salesperson(**salesperson_data.model_dump())

    with transaction(db):
        db.add(salesperson)

    db.refresh(salesperson)
    logger.info(f"Salesperson {salesperson.id} registered")

    return salesperson


@router.put("/{salesperson_id}", response_model=SalespersonResponse)
def update_salesperson(
    salesperson_id: str,
    salesperson_data: SalespersonUpdate,
    db: Session = Depends(get_db),
):
    salesperson = get_or_404(db, Salesperson, salesperson_id, "Salesperson")

    if salesperson_data.email is not None:
        _ensure_email_free(db, salesperson_data.email, salesperson_id)

    with transaction(db):
        apply_updates(salesperson, salesperson_data)

    db.refresh(salesperson)
    return salesperson


@router.delete("/{salesperson_id}", response_model=MessageResponse)
def delete_salesperson(salesperson_id: str, db: Session = Depends(get_db)):
    salesperson = get_or_404(db, Salesperson, salesperson_id, "Salesperson")

    with transaction(db):
        db.delete(salesperson)

    return {"message": "Salesperson deleted successfully"}
