# schemas/order.py

from datetime import date, datetime
from decimal import Decimal
from typing import List

from pydantic import Field

from app.core.constants import OrderStatus
from app.schemas.base import CamelModel
from app.schemas.customer import CustomerResponse
from app.schemas.product import ProductResponse
from app.schemas.salesperson import SalespersonResponse


class OrderItemCreate(CamelModel):
    product_id: int
    quantity: int = Field(..., gt=0)
    price_at_order: Decimal | None = Field(None, ge=0, lt=100_000_000)


class OrderCreate(CamelModel):
    customer_id: str = Field(..., min_length=1)
    salesperson_id: str | None = None
    products: List[OrderItemCreate] = Field(..., min_length=1)


class OrderUpdate(CamelModel):
    status: OrderStatus | None = None


class OrderProductResponse(CamelModel):
    order_id: int
    product_id: int
    quantity: int
    price_at_order: float
    product: ProductResponse


class OrderDeliveryResponse(CamelModel):
    id: int
    status: str
    estimated_delivery_date: date
    tracking_number: str | None


class OrderResponse(CamelModel):
    id: int
    status: OrderStatus
    total: float
    customer_id: str
    salesperson_id: str | None
    created_at: datetime
    updated_at: datetime


class OrderDetailResponse(OrderResponse):
    customer: CustomerResponse
    salesperson: SalespersonResponse | None = None
    order_products: List[OrderProductResponse]
    delivery: OrderDeliveryResponse | None = None
