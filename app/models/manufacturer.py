# app/models/manufacturer.py

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Manufacturer(Base):
    __tablename__ = "manufacturer"

    id = Column(String, primary_key=True, index=True)
    id_type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address = Column(String, nullable=False)
    email = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    products = relationship(
        "Product",
        back_populates="manufacturer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
