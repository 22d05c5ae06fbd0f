from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.base import CamelModel


class SalespersonCreate(CamelModel):
    id: str = Field(..., pattern=r"^\d+$")
    id_type: str
    name: str
    phone: str
    email: EmailStr


class SalespersonUpdate(CamelModel):
    id_type: str | None = None
    name: str | None = None
    phone: str | None = None
    email: EmailStr | None = None


class SalespersonResponse(CamelModel):
    id: str
    id_type: str
    name: str
    email: str
    phone: str
    created_at: datetime
    updated_at: datetime
