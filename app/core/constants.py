# app/core/constants.py

from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"


class DeliveryStatus(str, Enum):
    PENDING = "pending"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    FAILED = "failed"


class PlanPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class ReportPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUALLY = "semiannually"


# Months covered by each report period
REPORT_PERIOD_MONTHS = {
    ReportPeriod.MONTHLY: 1,
    ReportPeriod.QUARTERLY: 3,
    ReportPeriod.SEMIANNUALLY: 6,
}


def sql_in(enum_cls) -> str:
    return ", ".join(f"'{member.value}'" for member in enum_cls)
