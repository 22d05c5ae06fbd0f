from datetime import datetime

from app.schemas.base import CamelModel


class WarehouseCreate(CamelModel):
    name: str
    address: str


class WarehouseUpdate(CamelModel):
    name: str | None = None
    address: str | None = None


class WarehouseResponse(CamelModel):
    id: int
    name: str
    address: str
    created_at: datetime
    updated_at: datetime
