# =========================================================
# ORDER PLACEMENT
#
# Validation (no writes):
# - Customer / salesperson / products must exist
# - Per product, requested quantity across the order must be covered
#   by the sum of its lots
#
# Transaction (all-or-nothing):
# - Order + one line item per requested item, unit price snapshotted
# - Stock deducted lot by lot, largest lot first
# =========================================================

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.config import settings
from app.core.constants import OrderStatus
from app.core.errors import ApiError, BusinessRuleViolation, InternalError, NotFoundError
from app.database import transaction
from app.models.customer import Customer
from app.models.orders import Order, OrderProduct
from app.models.products import Product
from app.models.salesperson import Salesperson
from app.schemas.order import OrderCreate, OrderItemCreate
from app.services.inventory import lots_for_product
from app.services.lookups import require_existing

logger = logging.getLogger("app")


def order_query(db: Session):
    return (
        db.query(Order)
        .options(
            joinedload(Order.customer),
            joinedload(Order.salesperson),
            joinedload(Order.delivery),
            selectinload(Order.order_products).joinedload(OrderProduct.product),
        )
    )


def get_order(db: Session, order_id: int):
    order = order_query(db).filter(Order.id == order_id).first()

    if not order:
        raise NotFoundError("Order not found")

    return order


CENT = Decimal("0.01")


def resolve_unit_price(item: OrderItemCreate, product: Product) -> Decimal:
    """Unit price in whole cents, matching the Numeric(10, 2) line column."""
    if item.price_at_order is not None:
        price = Decimal(item.price_at_order)
    elif product.price is not None:
        price = Decimal(product.price)
    else:
        price = Decimal("0")

    return price.quantize(CENT, rounding=ROUND_HALF_UP)


def requested_quantities(items: list[OrderItemCreate]) -> dict[int, int]:
    """Quantity per product, summed over repeated items, in first-seen order."""
    requested = {}

    for item in items:
        requested[item.product_id] = requested.get(item.product_id, 0) + item.quantity

    return requested


def deduct_from_lots(lots, quantity: int) -> int:
    """
    Take `quantity` units out of `lots` in the given order.

    Each lot gives up at most what it holds, so no lot goes negative.
    Returns whatever could not be deducted.
    """
    remaining = quantity

    for lot in lots:
        if remaining <= 0:
            break

        deduction = min(remaining, lot.quantity)
        lot.quantity = lot.quantity - deduction
        remaining -= deduction

    return remaining


def place_order(db: Session, order_data: OrderCreate) -> Order:
    requested = requested_quantities(order_data.products)

    # ===============================
    # VALIDATION (NOTHING WRITTEN YET)
    # ===============================
    try:
        require_existing(db, Customer, order_data.customer_id, "Customer does not exist")

        if order_data.salesperson_id:
            require_existing(
                db,
                Salesperson,
                order_data.salesperson_id,
                "Salesperson does not exist",
            )

        products = {
            product.id: product
            for product in db.query(Product).filter(Product.id.in_(list(requested))).all()
        }

        if len(products) < len(requested):
            raise BusinessRuleViolation("One or more products not found")

        # Lots stay locked from this read until the order commits
        allocations = {}

        for product_id, quantity in requested.items():
            lots = lots_for_product(db, product_id, lock=settings.LOCK_INVENTORY_ROWS)
            available = sum(lot.quantity for lot in lots)

            if available < quantity:
                product = products[product_id]
                raise BusinessRuleViolation(
                    f"Not enough inventory for product {product.name or product_id}. "
                    f"Requested: {quantity}, Available: {available}"
                )

            allocations[product_id] = lots

    except ApiError:
        db.rollback()
        raise

    lines = [
        (item, resolve_unit_price(item, products[item.product_id]))
        for item in order_data.products
    ]
    total = sum((unit_price * item.quantity for item, unit_price in lines), Decimal("0.00"))

    # ===============================
    # ORDER + LINES + STOCK (ONE TRANSACTION)
    # ===============================
    try:
        with transaction(db):
            order = Order(
                status=OrderStatus.PENDING.value,
                total=total,
                customer_id=order_data.customer_id,
                salesperson_id=order_data.salesperson_id or None,
            )
            db.add(order)
            db.flush()

            db.add_all(
                [
                    OrderProduct(
                        order_id=order.id,
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price_at_order=unit_price,
                    )
                    for item, unit_price in lines
                ]
            )

            for product_id, quantity in requested.items():
                remaining = deduct_from_lots(allocations[product_id], quantity)

                if remaining > 0:
                    raise InternalError(
                        f"Failed to deduct all quantity for product {product_id}"
                    )

            db.flush()
            order_id = order.id

    except InternalError:
        logger.error(f"Order for customer {order_data.customer_id} rolled back during stock deduction")
        raise

    except SQLAlchemyError:
        logger.exception(f"Order for customer {order_data.customer_id} failed")
        raise InternalError("Order creation failed")

    logger.info(
        f"Order {order_id} placed: customer={order_data.customer_id} "
        f"lines={len(lines)} total={total}"
    )

    return get_order(db, order_id)
