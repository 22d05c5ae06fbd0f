from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.base import CamelModel


class ManufacturerCreate(CamelModel):
    id: str = Field(..., pattern=r"^\d+$", description="Tax or national id, digits only")
    id_type: str
    name: str
    phone: str
    address: str
    email: EmailStr


class ManufacturerUpdate(CamelModel):
    id_type: str | None = None
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    email: EmailStr | None = None


class ManufacturerResponse(CamelModel):
    id: str
    id_type: str
    name: str
    phone: str
    address: str
    email: str
    created_at: datetime
    updated_at: datetime
