# app/routers/statements.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from app.core.errors import NotFoundError
from app.database import get_db, transaction
from app.models.customer import Customer
from app.models.salesperson import Salesperson
from app.models.statement import Statement
from app.schemas.base import MessageResponse
from app.schemas.statement import (
    StatementCreate,
    StatementUpdate,
    StatementResponse,
    StatementDetailResponse,
)
from app.services.lookups import apply_updates, get_or_404, require_existing

router = APIRouter(prefix="/statement", tags=["Statements"])


@router.get("", response_model=list[StatementDetailResponse])
def list_statements(
    salesperson_id: Optional[str] = Query(None, alias="salespersonId"),
    customer_id: Optional[str] = Query(None, alias="customerId"),
    db: Session = Depends(get_db),
):
    query = db.query(Statement).options(
        joinedload(Statement.salesperson),
        joinedload(Statement.customer),
    )

    if salesperson_id:
        query = query.filter(Statement.salesperson_id == salesperson_id)
    if customer_id:
        query = query.filter(Statement.customer_id == customer_id)

    return query.order_by(Statement.date.desc(), Statement.id.desc()).all()


@router.get("/{statement_id}", response_model=StatementDetailResponse)
def read_statement(statement_id: int, db: Session = Depends(get_db)):
    statement = (
        db.query(Statement)
        .options(joinedload(Statement.salesperson), joinedload(Statement.customer))
        .filter(Statement.id == statement_id)
        .first()
    )

    if not statement:
        raise NotFoundError("Statement not found")

    return statement


@router.post("", response_model=StatementResponse, status_code=status.HTTP_201_CREATED)
def create_statement(statement_data: StatementCreate, db: Session = Depends(get_db)):
    require_existing(db, Salesperson, statement_data.salesperson_id, "Salesperson does not exist")
    require_existing(db, Customer, statement_data.customer_id, "Customer does not exist")

    statement = Statement(**statement_data.model_dump())

    with transaction(db):
        db.add(statement)

    db.refresh(statement)
    return statement


@router.patch("/{statement_id}", response_model=StatementResponse)
def update_statement(
    statement_id: int,
    statement_data: StatementUpdate,
    db: Session = Depends(get_db),
):
    statement = get_or_404(db, Statement, statement_id, "Statement")

    if statement_data.salesperson_id is not None:
        require_existing(db, Salesperson, statement_data.salesperson_id, "Salesperson does not exist")
    if statement_data.customer_id is not None:
        require_existing(db, Customer, statement_data.customer_id, "Customer does not exist")

    with transaction(db):
        apply_updates(statement, statement_data)

    db.refresh(statement)
    return statement


@router.delete("/{statement_id}", response_model=MessageResponse)
def delete_statement(statement_id: int, db: Session = Depends(get_db)):
    statement = get_or_404(db, Statement, statement_id, "Statement")

    with transaction(db):
        db.delete(statement)

    return {"message": "Statement deleted successfully"}
