# =========================================================
# ORDER ROUTER
#
# - POST places an order (validation, line items, stock deduction)
# - PATCH sets the status (pending, sent, delivered)
# - Reads always embed customer, salesperson, lines and delivery
# =========================================================

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.core.config import settings
from app.core.rate_limiter import limiter
from app.models.customer import Customer
from app.models.orders import Order
from app.schemas.base import MessageResponse
from app.schemas.order import OrderCreate, OrderDetailResponse, OrderResponse, OrderUpdate
from app.services.lookups import apply_updates, get_or_404
from app.services.orders import get_order, order_query, place_order

router = APIRouter(prefix="/order", tags=["Orders"])


# =========================================================
# CREATE ORDER
# =========================================================
@router.post("", response_model=OrderDetailResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.ORDER_RATE_LIMIT)
def create_order(
    request: Request,
    order_data: OrderCreate,
    db: Session = Depends(get_db),
):
    return place_order(db, order_data)


# =========================================================
# LIST ORDERS
# =========================================================
@router.get("", response_model=list[OrderDetailResponse])
def list_orders(db: Session = Depends(get_db)):
    return order_query(db).order_by(Order.id).all()


# =========================================================
# ORDERS OF ONE CUSTOMER (NEWEST FIRST)
# =========================================================
@router.get("/customer/{customer_id}", response_model=list[OrderDetailResponse])
def list_customer_orders(
    customer_id: str,
    db: Session = Depends(get_db),
):
    get_or_404(db, Customer, customer_id, "Customer")

    return (
        order_query(db)
        .filter(Order.customer_id == customer_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )


@router.get("/{order_id}", response_model=OrderDetailResponse)
def read_order(
    order_id: int,
    db: Session = Depends(get_db),
):
    return get_order(db, order_id)


@router.patch("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    order_data: OrderUpdate,
    db: Session = Depends(get_db),
):
    order = get_or_404(db, Order, order_id, "Order")

    with transaction(db):
        apply_updates(order, order_data)

    db.refresh(order)
    return order


@router.delete("/{order_id}", response_model=MessageResponse)
def delete_order(
    order_id: int,
    db: Session = Depends(get_db),
):
    order = get_or_404(db, Order, order_id, "Order")

    with transaction(db):
        db.delete(order)

    return {"message": "Order deleted successfully"}
