# app/routers/manufacturers.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.core.errors import BusinessRuleViolation
from app.models.manufacturer import Manufacturer
from app.schemas.base import MessageResponse
from app.schemas.manufacturer import ManufacturerCreate, ManufacturerUpdate, ManufacturerResponse
from app.services.lookups import apply_updates, get_or_404

router = APIRouter(prefix="/manufacturer", tags=["Manufacturers"])


@router.get("", response_model=list[ManufacturerResponse])
def list_manufacturers(db: Session = Depends(get_db)):
    return db.query(Manufacturer).order_by(Manufacturer.name).all()


@router.get("/{manufacturer_id}", response_model=ManufacturerResponse)
def read_manufacturer(manufacturer_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Manufacturer, manufacturer_id, "Manufacturer")


@router.post("", response_model=ManufacturerResponse, status_code=status.HTTP_201_CREATED)
def create_manufacturer(
    manufacturer_data: ManufacturerCreate,
    db: Session = Depends(get_db),
):
    if db.get(Manufacturer, manufacturer_data.id):
        raise BusinessRuleViolation("Manufacturer already exists")

    manufacturer = Manufacturer(**manufacturer_data.model_dump())

    with transaction(db):
        db.add(manufacturer)

    db.refresh(manufacturer)
    return manufacturer


@router.put("/{manufacturer_id}", response_model=ManufacturerResponse)
def update_manufacturer(
    manufacturer_id: str,
    manufacturer_data: ManufacturerUpdate,
    db: Session = Depends(get_db),
):
    manufacturer = get_or_404(db, Manufacturer, manufacturer_id, "Manufacturer")

    with transaction(db):
        apply_updates(manufacturer, manufacturer_data)

    db.refresh(manufacturer)
    return manufacturer


@router.delete("/{manufacturer_id}", response_model=MessageResponse)
def delete_manufacturer(manufacturer_id: str, db: Session = Depends(get_db)):
    manufacturer = get_or_404(db, Manufacturer, manufacturer_id, "Manufacturer")

    with transaction(db):
        db.delete(manufacturer)

    return {"message": "Manufacturer deleted successfully"}
