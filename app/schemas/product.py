from decimal import Decimal
from datetime import datetime
from typing import List

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.manufacturer import ManufacturerResponse


class ProductCreate(CamelModel):
    name: str
    description: str

    price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        description="Unit price, must be below 100 million"
    )

    storage_condition: str
    manufacturer_id: str = Field(..., pattern=r"^\d+$")


class ProductBatchCreate(CamelModel):
    products: List[ProductCreate] = Field(..., min_length=1)


class ProductUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, lt=100_000_000)
    storage_condition: str | None = None
    manufacturer_id: str | None = Field(None, pattern=r"^\d+$")


class ProductResponse(CamelModel):
    id: int
    name: str
    description: str
    price: float | None
    storage_condition: str
    manufacturer_id: str
    created_at: datetime
    updated_at: datetime


class ProductDetailResponse(ProductResponse):
    manufacturer: ManufacturerResponse | None = None
