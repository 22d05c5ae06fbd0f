# app/routers/warehouses.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.models.warehouse import Warehouse
from app.schemas.base import MessageResponse
from app.schemas.warehouse import WarehouseCreate, WarehouseUpdate, WarehouseResponse
from app.services.lookups import apply_updates, get_or_404

router = APIRouter(prefix="/warehouse", tags=["Warehouses"])


@router.get("", response_model=list[WarehouseResponse])
def list_warehouses(db: Session = Depends(get_db)):
    return db.query(Warehouse).order_by(Warehouse.id).all()


@router.get("/{warehouse_id}", response_model=WarehouseResponse)
def read_warehouse(warehouse_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Warehouse, warehouse_id, "Warehouse")


@router.post("", response_model=WarehouseResponse, status_code=status.HTTP_201_CREATED)
def create_warehouse(
    warehouse_data: WarehouseCreate,
    db: Session = Depends(get_db),
):
    warehouse = Warehouse(name=warehouse_data.name, address=warehouse_data.address)

    with transaction(db):
        db.add(warehouse)

    db.refresh(warehouse)
    return warehouse


@router.put("/{warehouse_id}", response_model=WarehouseResponse)
def update_warehouse(
    warehouse_id: int,
    warehouse_data: WarehouseUpdate,
    db: Session = Depends(get_db),
):
    warehouse = get_or_404(db, Warehouse, warehouse_id, "Warehouse")

    with transaction(db):
        apply_updates(warehouse, warehouse_data)

    db.refresh(warehouse)
    return warehouse


@router.delete("/{warehouse_id}", response_model=MessageResponse)
def delete_warehouse(warehouse_id: int, db: Session = Depends(get_db)):
    warehouse = get_or_404(db, Warehouse, warehouse_id, "Warehouse")

    with transaction(db):
        db.delete(warehouse)

    return {"message": "Warehouse deleted successfully"}
