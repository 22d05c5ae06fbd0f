# app/models/visit.py

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Visit(Base):
    __tablename__ = "visit"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(DateTime, nullable=False)
    comments = Column(String, nullable=False)

    customer_id = Column(String, ForeignKey("customer.id", ondelete="CASCADE"), nullable=False, index=True)
    salesperson_id = Column(String, ForeignKey("salesperson.id", ondelete="CASCADE"), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    customer = relationship("Customer")
    salesperson = relationship("Salesperson")

    __table_args__ = (
        Index("ix_visit_salesperson_date", "salesperson_id", "date"),
    )
