from datetime import datetime
from typing import List

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.product import ProductResponse
from app.schemas.warehouse import WarehouseResponse


class InventoryItemCreate(CamelModel):
    warehouse_id: int
    product_id: int
    quantity: int = Field(..., ge=0)


class InventoryBatchCreate(CamelModel):
    inventories: List[InventoryItemCreate] = Field(..., min_length=1)


class InventoryUpdate(CamelModel):
    quantity: int | None = Field(None, ge=0)
    warehouse_id: int | None = None
    product_id: int | None = None


class InventoryResponse(CamelModel):
    id: int
    quantity: int
    warehouse_id: int
    created_at: datetime
    updated_at: datetime
    warehouse: WarehouseResponse
    products: List[ProductResponse]


class ProductWarehouseResponse(CamelModel):
    """One lot of a product, flattened onto its warehouse."""

    id: int
    name: str
    address: str
    inventory_id: int
    quantity: int


class ProductTotalQuantityResponse(CamelModel):
    product_id: int
    total_quantity: int


class ProductStockResponse(CamelModel):
    inventory_id: int
    quantity: int
    product: ProductResponse
    warehouse: WarehouseResponse
