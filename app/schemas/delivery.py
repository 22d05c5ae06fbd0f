from datetime import date, datetime

from app.core.constants import DeliveryStatus
from app.schemas.base import CamelModel
from app.schemas.customer import CustomerResponse
from app.schemas.order import OrderProductResponse, OrderResponse
from app.schemas.salesperson import SalespersonResponse


class DeliveryCreate(CamelModel):
    order_id: int
    estimated_delivery_date: date
    tracking_number: str | None = None
    notes: str | None = None
    address: str


class DeliveryUpdate(CamelModel):
    status: DeliveryStatus | None = None
    estimated_delivery_date: date | None = None
    actual_delivery_date: date | None = None
    tracking_number: str | None = None
    notes: str | None = None
    address: str | None = None


class DeliveryResponse(CamelModel):
    id: int
    order_id: int
    status: DeliveryStatus
    estimated_delivery_date: date
    actual_delivery_date: date | None
    tracking_number: str | None
    notes: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime


class DeliveryOrderResponse(OrderResponse):
    customer: CustomerResponse
    salesperson: SalespersonResponse | None = None
    order_products: list[OrderProductResponse] = []


class DeliveryDetailResponse(DeliveryResponse):
    order: DeliveryOrderResponse
