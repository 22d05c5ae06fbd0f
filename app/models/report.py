# app/models/report.py

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.core.constants import ReportPeriod, sql_in
from app.database import Base


class Report(Base):
    __tablename__ = "report"

    __table_args__ = (
        CheckConstraint(
            f"period_type IN ({sql_in(ReportPeriod)})",
            name="ck_report_period_type_valid",
        ),
        CheckConstraint(
            "period_end >= period_start",
            name="ck_report_period_valid",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String, nullable=False)
    date = Column(DateTime, nullable=False)

    salesperson_id = Column(
        String,
        ForeignKey("salesperson.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    period_type = Column(String(20), nullable=True)
    period_start = Column(DateTime(timezone=True), nullable=True)
    period_end = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    salesperson = relationship("Salesperson")
