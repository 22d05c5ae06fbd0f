# Register every mapped class so string relationships resolve and
# Base.metadata is complete for create_all / Alembic.

from app.models.manufacturer import Manufacturer
from app.models.products import Product
from app.models.warehouse import Warehouse
from app.models.inventory import Inventory, InventoryProduct
from app.models.salesperson import Salesperson
from app.models.customer import Customer
from app.models.orders import Order, OrderProduct
from app.models.delivery import Delivery
from app.models.visit import Visit
from app.models.statement import Statement
from app.models.sales_plan import SalesPlan
from app.models.report import Report

__all__ = [
    "Customer",
    "Delivery",
    "Inventory",
    "InventoryProduct",
    "Manufacturer",
    "Order",
    "OrderProduct",
    "Product",
    "Report",
    "SalesPlan",
    "Salesperson",
    "Statement",
    "Visit",
    "Warehouse",
]
