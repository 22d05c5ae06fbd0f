# app/routers/deliveries.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.constants import DeliveryStatus
from app.core.errors import BusinessRuleViolation, NotFoundError
from app.database import get_db, transaction
from app.models.delivery import Delivery
from app.models.orders import Order, OrderProduct
from app.schemas.base import MessageResponse
from app.schemas.delivery import (
    DeliveryCreate,
    DeliveryUpdate,
    DeliveryResponse,
    DeliveryDetailResponse,
)
from app.services.lookups import apply_updates, get_or_404, require_existing

logger = logging.getLogger("app")

router = APIRouter(prefix="/delivery", tags=["Deliveries"])


def delivery_query(db: Session):
    return db.query(Delivery).options(
        joinedload(Delivery.order).joinedload(Order.customer),
        joinedload(Delivery.order).joinedload(Order.salesperson),
        joinedload(Delivery.order)
        .selectinload(Order.order_products)
        .joinedload(OrderProduct.product),
    )


@router.get("", response_model=list[DeliveryDetailResponse])
def list_deliveries(db: Session = Depends(get_db)):
    return delivery_query(db).order_by(Delivery.id.desc()).all()


@router.get("/{delivery_id}", response_model=DeliveryDetailResponse)
def read_delivery(delivery_id: int, db: Session = Depends(get_db)):
    delivery = delivery_query(db).filter(Delivery.id == delivery_id).first()

    if not delivery:
        raise NotFoundError("Delivery not found")

    return delivery


@router.post("", response_model=DeliveryResponse, status_code=status.HTTP_201_CREATED)
def create_delivery(delivery_data: DeliveryCreate, db: Session = Depends(get_db)):
    require_existing(db, Order, delivery_data.order_id, "Order does not exist")

    existing = db.query(Delivery).filter(Delivery.order_id == delivery_data.order_id).first()
    if existing:
        raise BusinessRuleViolation("Delivery already exists for this order")

    delivery = Delivery(
        status=DeliveryStatus.PENDING.value,
        **delivery_data.model_dump(),
    )

    with transaction(db):
        db.add(delivery)

    db.refresh(delivery)
    logger.info(f"Delivery {delivery.id} scheduled for order {delivery.order_id}")

    return delivery


@router.patch("/{delivery_id}", response_model=DeliveryResponse)
def update_delivery(
    delivery_id: int,
    delivery_data: DeliveryUpdate,
    db: Session = Depends(get_db),
):
    delivery = get_or_404(db, Delivery, delivery_id, "Delivery")

    with transaction(db):
        changes = apply_updates(delivery, delivery_data)

    if "status" in changes:
        logger.info(f"Delivery {delivery_id} -> {delivery.status}")

    db.refresh(delivery)
    return delivery


@router.delete("/{delivery_id}", response_model=MessageResponse)
def delete_delivery(delivery_id: int, db: Session = Depends(get_db)):
    delivery = get_or_404(db, Delivery, delivery_id, "Delivery")

    with transaction(db):
        db.delete(delivery)

    return {"message": "Delivery deleted successfully"}
