# app/models/orders.py

from sqlalchemy import CheckConstraint, Column, Index, Integer, DateTime, ForeignKey, Numeric, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.core.constants import OrderStatus, sql_in
from app.database import Base


class Order(Base):
    __tablename__ = "order"

    id = Column(Integer, primary_key=True, index=True)

    status = Column(String, nullable=False, default=OrderStatus.PENDING.value)

    total = Column(Numeric(10, 2), nullable=False)

    customer_id = Column(
        String,
        ForeignKey("customer.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    salesperson_id = Column(
        String,
        ForeignKey("salesperson.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    customer = relationship("Customer")
    salesperson = relationship("Salesperson")

    order_products = relationship(
        "OrderProduct",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderProduct.id",
    )

    delivery = relationship(
        "Delivery",
        back_populates="order",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


    # Composite index for salesperson and date filtering
    __table_args__ = (
        Index("ix_order_salesperson_created", "salesperson_id", "created_at"),
        CheckConstraint(f"status IN ({sql_in(OrderStatus)})", name="ck_order_status_valid"),
    )


class OrderProduct(Base):
    """Line item; price_at_order is the unit price snapshotted at placement."""

    __tablename__ = "order_product"

    id = Column(Integer, primary_key=True, index=True)

    order_id = Column(Integer, ForeignKey("order.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    price_at_order = Column(Numeric(10, 2), nullable=False)

    order = relationship("Order", back_populates="order_products")
    product = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_product_quantity_positive"),
    )
