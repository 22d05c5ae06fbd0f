# app/models/inventory.py

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Inventory(Base):
    """A stock lot held at one warehouse."""

    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, index=True)
    quantity = Column(Integer, nullable=False)
    warehouse_id = Column(
        Integer,
        ForeignKey("warehouse.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    warehouse = relationship("Warehouse", back_populates="inventories")

    product_links = relationship(
        "InventoryProduct",
        back_populates="inventory",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Read side of the join table; writes go through InventoryProduct rows
    products = relationship(
        "Product",
        secondary="inventory_product",
        viewonly=True,
        order_by="Product.id",
    )

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )


class InventoryProduct(Base):
    __tablename__ = "inventory_product"

    inventory_id = Column(
        Integer,
        ForeignKey("inventory.id", ondelete="CASCADE"),
        primary_key=True,
    )
    product_id = Column(
        Integer,
        ForeignKey("product.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    inventory = relationship("Inventory", back_populates="product_links")
    product = relationship("Product")
