# app/models/products.py

from sqlalchemy import CheckConstraint, Column, Integer, String, Numeric, ForeignKey, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Product(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=True)
    storage_condition = Column(String, nullable=False)

    manufacturer_id = Column(
        String,
        ForeignKey("manufacturer.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    manufacturer = relationship("Manufacturer", back_populates="products")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )
