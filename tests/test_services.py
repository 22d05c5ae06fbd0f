import warnings

import pytest
from sqlalchemy.exc import SAWarning

from app.core.errors import BusinessRuleViolation, InternalError
from app.models.inventory import Inventory, InventoryProduct
from app.models.orders import Order, OrderProduct
from app.schemas.inventory import InventoryItemCreate, InventoryUpdate
from app.schemas.order import OrderCreate, OrderItemCreate
from app.services import orders as order_service
from app.services.inventory import (
    create_inventory_lots,
    delete_inventory,
    lots_for_product,
    update_inventory,
)


@pytest.fixture
def seeded(make_product, make_warehouse, make_lots, make_customer):
    product = make_product(name="Atorvastatin", price=30)
    warehouse = make_warehouse()
    lot = make_lots((warehouse["id"], product["id"], 10))[0]
    customer = make_customer()
    return product, warehouse, lot, customer


def test_place_order_through_service(db_session, seeded):
    product, _, lot, customer = seeded

    order = order_service.place_order(
        db_session,
        OrderCreate(
            customer_id=customer["id"],
            products=[OrderItemCreate(product_id=product["id"], quantity=4)],
        ),
    )

    assert order.total == 120
    assert [line.quantity for line in order.order_products] == [4]
    assert db_session.get(Inventory, lot["id"]).quantity == 6


def test_failed_deduction_rolls_back_everything(db_session, seeded, monkeypatch):
    product, _, lot, customer = seeded

    def short_deduction(lots, quantity):
        lots[0].quantity -= 1
        return quantity - 1

    monkeypatch.setattr(order_service, "deduct_from_lots", short_deduction)

    with pytest.raises(InternalError):
        order_service.place_order(
            db_session,
            OrderCreate(
                customer_id=customer["id"],
                products=[OrderItemCreate(product_id=product["id"], quantity=3)],
            ),
        )

    assert db_session.query(Order).count() == 0
    assert db_session.query(OrderProduct).count() == 0
    assert db_session.get(Inventory, lot["id"]).quantity == 10


def test_sufficiency_failure_leaves_session_clean(db_session, seeded):
    product, _, lot, customer = seeded

    with pytest.raises(BusinessRuleViolation):
        order_service.place_order(
            db_session,
            OrderCreate(
                customer_id=customer["id"],
                products=[OrderItemCreate(product_id=product["id"], quantity=11)],
            ),
        )

    assert db_session.query(Order).count() == 0
    assert db_session.get(Inventory, lot["id"]).quantity == 10


def test_lots_for_product_orders_largest_first(db_session, seeded, make_lots):
    product, warehouse, first_lot, _ = seeded
    make_lots((warehouse["id"], product["id"], 25), (warehouse["id"], product["id"], 10))

    lots = lots_for_product(db_session, product["id"])

    assert [lot.quantity for lot in lots] == [25, 10, 10]
    assert lots[1].id == first_lot["id"]


def test_reassignment_keeps_a_single_association(db_session, seeded, make_product):
    _, warehouse, lot, _ = seeded
    replacement = make_product(name="Rosuvastatin", price=35)

    update_inventory(db_session, lot["id"], InventoryUpdate(product_id=replacement["id"]))
    update_inventory(db_session, lot["id"], InventoryUpdate(product_id=replacement["id"]))

    links = db_session.query(InventoryProduct).filter(InventoryProduct.inventory_id == lot["id"]).all()
    assert [link.product_id for link in links] == [replacement["id"]]


def test_create_inventory_lots_returns_in_request_order(db_session, seeded):
    product, warehouse, _, _ = seeded

    lots = create_inventory_lots(
        db_session,
        [
            InventoryItemCreate(warehouse_id=warehouse["id"], product_id=product["id"], quantity=1),
            InventoryItemCreate(warehouse_id=warehouse["id"], product_id=product["id"], quantity=2),
        ],
    )

    assert [lot.quantity for lot in lots] == [1, 2]
    assert all(lot.warehouse.id == warehouse["id"] for lot in lots)


def test_delete_inventory_removes_each_link_once(db_session, seeded):
    _, _, lot, _ = seeded

    with warnings.catch_warnings():
        warnings.simplefilter("error", SAWarning)
        delete_inventory(db_session, lot["id"])

    assert db_session.get(Inventory, lot["id"]) is None
    assert db_session.query(InventoryProduct).filter(InventoryProduct.inventory_id == lot["id"]).count() == 0


def test_reassignment_emits_no_stale_row_warnings(db_session, seeded, make_product):
    _, _, lot, _ = seeded
    replacement = make_product(name="Simvastatin", price=18)

    with warnings.catch_warnings():
        warnings.simplefilter("error", SAWarning)
        update_inventory(db_session, lot["id"], InventoryUpdate(product_id=replacement["id"]))
        delete_inventory(db_session, lot["id"])

    assert db_session.query(InventoryProduct).count() == 0
