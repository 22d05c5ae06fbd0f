# app/models/delivery.py

from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.core.constants import DeliveryStatus, sql_in
from app.database import Base


class Delivery(Base):
    __tablename__ = "delivery"

    __table_args__ = (
        CheckConstraint(
            f"status IN ({sql_in(DeliveryStatus)})",
            name="ck_delivery_status_valid",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)

    # One delivery per order
    order_id = Column(
        Integer,
        ForeignKey("order.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    status = Column(String, nullable=False, default=DeliveryStatus.PENDING.value)

    estimated_delivery_date = Column(Date, nullable=False)
    actual_delivery_date = Column(Date, nullable=True)

    tracking_number = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    address = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    order = relationship("Order", back_populates="delivery")
