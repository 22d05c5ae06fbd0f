# =========================================================
# INVENTORY ALLOCATION
#
# - Lots are Inventory rows linked to a product through inventory_product
# - Batch creation validates every warehouse/product up front, then
#   inserts lot + association pairs in one transaction
# - Reassigning a lot's product replaces its association
# =========================================================

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.errors import InternalError, NotFoundError
from app.database import transaction
from app.models.inventory import Inventory, InventoryProduct
from app.models.products import Product
from app.models.warehouse import Warehouse
from app.schemas.inventory import InventoryItemCreate, InventoryUpdate
from app.services.lookups import get_or_404, require_all_existing, require_existing

logger = logging.getLogger("app")


def lot_query(db: Session):
    return (
        db.query(Inventory)
        .options(
            joinedload(Inventory.warehouse),
            selectinload(Inventory.products),
        )
    )


def list_lots(db: Session):
    return lot_query(db).order_by(Inventory.id).all()


def get_lot(db: Session, inventory_id: int):
    lot = lot_query(db).filter(Inventory.id == inventory_id).first()

    if not lot:
        raise NotFoundError("Inventory not found")

    return lot


def lots_for_product(
    db: Session,
    product_id: int,
    warehouse_id: int | None = None,
    lock: bool = False,
):
    """Lots carrying the product, largest first (ties by id)."""
    query = (
        db.query(Inventory)
        .join(InventoryProduct, InventoryProduct.inventory_id == Inventory.id)
        .filter(InventoryProduct.product_id == product_id)
        .order_by(Inventory.quantity.desc(), Inventory.id.asc())
    )

    if warehouse_id is not None:
        query = query.filter(Inventory.warehouse_id == warehouse_id)

    if lock:
        query = query.with_for_update(of=Inventory)

    return query.all()


# =========================================================
# BATCH CREATE
# =========================================================
def create_inventory_lots(db: Session, items: list[InventoryItemCreate]):
    require_all_existing(
        db,
        Warehouse,
        [item.warehouse_id for item in items],
        "One or more warehouses do not exist",
    )
    require_all_existing(
        db,
        Product,
        [item.product_id for item in items],
        "One or more products do not exist",
    )

    created_ids = []

    try:
        with transaction(db):
            for item in items:
                lot = Inventory(
                    quantity=item.quantity,
                    warehouse_id=item.warehouse_id,
                )
                db.add(lot)
                db.flush()

                db.add(InventoryProduct(inventory_id=lot.id, product_id=item.product_id))
                created_ids.append(lot.id)

    except SQLAlchemyError:
        logger.exception("Inventory batch creation failed")
        raise InternalError("Inventory creation failed")

    logger.info(f"Created {len(created_ids)} inventory lot(s): {created_ids}")

    lots = {
        lot.id: lot
        for lot in lot_query(db).filter(Inventory.id.in_(created_ids)).all()
    }
    return [lots[lot_id] for lot_id in created_ids]


# =========================================================
# UPDATE / REASSIGN
# =========================================================
def update_inventory(db: Session, inventory_id: int, data: InventoryUpdate):
    lot = get_or_404(db, Inventory, inventory_id, "Inventory")

    if data.product_id is not None:
        require_existing(db, Product, data.product_id, "Product does not exist")

    if data.warehouse_id is not None:
        require_existing(db, Warehouse, data.warehouse_id, "Warehouse does not exist")

    try:
        with transaction(db):
            if data.quantity is not None:
                lot.quantity = data.quantity

            if data.warehouse_id is not None:
                lot.warehouse_id = data.warehouse_id

            if data.product_id is not None:
                for link in lot.product_links:
                    db.delete(link)
                db.flush()
                db.expire(lot, ["product_links"])

                db.add(InventoryProduct(inventory_id=lot.id, product_id=data.product_id))

    except SQLAlchemyError:
        logger.exception(f"Inventory {inventory_id} update failed")
        raise InternalError("Inventory update failed")

    return get_lot(db, inventory_id)


def delete_inventory(db: Session, inventory_id: int):
    lot = get_or_404(db, Inventory, inventory_id, "Inventory")

    with transaction(db):
        for link in lot.product_links:
            db.delete(link)
        db.flush()
        db.expire(lot, ["product_links"])

        db.delete(lot)

    logger.info(f"Deleted inventory lot {inventory_id}")


# =========================================================
# AGGREGATION READS
# =========================================================
def warehouses_for_product(db: Session, product_id: int):
    get_or_404(db, Product, product_id, "Product")

    rows = (
        db.query(Inventory, Warehouse)
        .join(InventoryProduct, InventoryProduct.inventory_id == Inventory.id)
        .join(Warehouse, Warehouse.id == Inventory.warehouse_id)
        .filter(InventoryProduct.product_id == product_id)
        .order_by(Warehouse.id, Inventory.id)
        .all()
    )

    return [
        {
            "id": warehouse.id,
            "name": warehouse.name,
            "address": warehouse.address,
            "inventory_id": lot.id,
            "quantity": lot.quantity,
        }
        for lot, warehouse in rows
    ]


def total_quantity_for_product(db: Session, product_id: int) -> int:
    get_or_404(db, Product, product_id, "Product")

    total = (
        db.query(func.coalesce(func.sum(Inventory.quantity), 0))
        .join(InventoryProduct, InventoryProduct.inventory_id == Inventory.id)
        .filter(InventoryProduct.product_id == product_id)
        .scalar()
    )

    return int(total or 0)


def stock_in_warehouse(db: Session, product_id: int, warehouse_id: int):
    product = get_or_404(db, Product, product_id, "Product")
    warehouse = get_or_404(db, Warehouse, warehouse_id, "Warehouse")

    lots = lots_for_product(db, product_id, warehouse_id=warehouse_id)

    if not lots:
        raise NotFoundError("Product not found in specified warehouse")

    return {
        "inventory_id": lots[0].id,
        "quantity": sum(lot.quantity for lot in lots),
        "product": product,
        "warehouse": warehouse,
    }
