# app/routers/customers.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.errors import BusinessRuleViolation, ValidationError
from app.database import get_db, transaction
from app.models.customer import Customer
from app.models.salesperson import Salesperson
from app.schemas.base import MessageResponse
from app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerSalespersonUpdate,
    CustomerResponse,
)
from app.services.lookups import apply_updates, get_or_404, require_existing

logger = logging.getLogger("app")

router = APIRouter(prefix="/customer", tags=["Customers"])


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    return db.query(Customer).order_by(Customer.name).all()


@router.get("/salesperson/{salesperson_id}", response_model=list[CustomerResponse])
def list_salesperson_customers(salesperson_id: str, db: Session = Depends(get_db)):
    get_or_404(db, Salesperson, salesperson_id, "Salesperson")

    return (
        db.query(Customer)
        .filter(Customer.salesperson_id == salesperson_id)
        .order_by(Customer.name)
        .all()
    )


@router.get("/{customer_id}", response_model=CustomerResponse)
def read_customer(customer_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Customer, customer_id, "Customer")


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db),
):
    if db.get(Customer, customer_data.id):
        raise BusinessRuleViolation("Customer already exists")

    if customer_data.salesperson_id:
        require_existing(db, Salesperson, customer_data.salesperson_id, "Salesperson does not exist")

    customer = Customer(**customer_data.model_dump())

    with transaction(db):
        db.add(customer)

    db.refresh(customer)
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
):
    if "salesperson_id" in customer_data.model_fields_set:
        raise BusinessRuleViolation(
            "Forbidden salespersonId update",
            cause="Use PATCH /api/customer/{id}/salesperson to reassign a customer",
        )

    customer = get_or_404(db, Customer, customer_id, "Customer")

    with transaction(db):
        apply_updates(customer, customer_data)

    db.refresh(customer)
    return customer


@router.patch("/{customer_id}/salesperson", response_model=CustomerResponse)
def reassign_salesperson(
    customer_id: str,
    assignment: CustomerSalespersonUpdate,
    db: Session = Depends(get_db),
):
    if not assignment.salesperson_id or not assignment.salesperson_id.strip():
        raise ValidationError("salespersonId is required")

    customer = get_or_404(db, Customer, customer_id, "Customer")
    require_existing(db, Salesperson, assignment.salesperson_id, "Salesperson not found")

    previous = customer.salesperson_id

    with transaction(db):
        customer.salesperson_id = assignment.salesperson_id

    db.refresh(customer)
    logger.info(f"Customer {customer_id} reassigned: {previous} -> {assignment.salesperson_id}")

    return customer


@router.delete("/{customer_id}", response_model=MessageResponse)
def delete_customer(customer_id: str, db: Session = Depends(get_db)):
    customer = get_or_404(db, Customer, customer_id, "Customer")

    with transaction(db):
        db.delete(customer)

    return {"message": "Customer deleted successfully"}
