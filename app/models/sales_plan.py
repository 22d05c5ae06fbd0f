# app/models/sales_plan.py

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.core.constants import PlanPeriod, sql_in
from app.database import Base


class SalesPlan(Base):
    __tablename__ = "sales_plan"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    period = Column(String, nullable=False)

    salesperson_id = Column(String, ForeignKey("salesperson.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    salesperson = relationship("Salesperson")

    __table_args__ = (
        CheckConstraint(f"period IN ({sql_in(PlanPeriod)})", name="ck_sales_plan_period_valid"),
    )
