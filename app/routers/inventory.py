# app/routers/inventory.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.errors import parse_id
from app.schemas.base import MessageResponse
from app.schemas.inventory import (
    InventoryBatchCreate,
    InventoryUpdate,
    InventoryResponse,
    ProductStockResponse,
    ProductTotalQuantityResponse,
    ProductWarehouseResponse,
)
from app.services import inventory as inventory_service

router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"],
)


@router.post("", response_model=list[InventoryResponse], status_code=status.HTTP_201_CREATED)
def create_inventory(
    inventory_data: InventoryBatchCreate,
    db: Session = Depends(get_db),
):
    return inventory_service.create_inventory_lots(db, inventory_data.inventories)


@router.get("", response_model=list[InventoryResponse])
def list_inventory(db: Session = Depends(get_db)):
    return inventory_service.list_lots(db)


@router.get("/product/{product_id}/warehouses", response_model=list[ProductWarehouseResponse])
def product_warehouses(
    product_id: str,
    db: Session = Depends(get_db),
):
    return inventory_service.warehouses_for_product(db, parse_id(product_id, "product"))


@router.get("/product/{product_id}/total-quantity", response_model=ProductTotalQuantityResponse)
def product_total_quantity(
    product_id: str,
    db: Session = Depends(get_db),
):
    parsed_id = parse_id(product_id, "product")

    return {
        "product_id": parsed_id,
        "total_quantity": inventory_service.total_quantity_for_product(db, parsed_id),
    }


@router.get("/product/{product_id}/warehouse/{warehouse_id}", response_model=ProductStockResponse)
def product_stock_in_warehouse(
    product_id: str,
    warehouse_id: str,
    db: Session = Depends(get_db),
):
    return inventory_service.stock_in_warehouse(
        db,
        parse_id(product_id, "product"),
        parse_id(warehouse_id, "warehouse"),
    )


@router.get("/{inventory_id}", response_model=InventoryResponse)
def read_inventory(
    inventory_id: str,
    db: Session = Depends(get_db),
):
    return inventory_service.get_lot(db, parse_id(inventory_id, "inventory"))


@router.put("/{inventory_id}", response_model=InventoryResponse)
def update_inventory(
    inventory_id: str,
    inventory_data: InventoryUpdate,
    db: Session = Depends(get_db),
):
    return inventory_service.update_inventory(
        db,
        parse_id(inventory_id, "inventory"),
        inventory_data,
    )


@router.delete("/{inventory_id}", response_model=MessageResponse)
def delete_inventory(
    inventory_id: str,
    db: Session = Depends(get_db),
):
    inventory_service.delete_inventory(db, parse_id(inventory_id, "inventory"))

    return {"message": "Inventory deleted successfully"}
