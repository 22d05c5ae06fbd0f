# app/services/lookups.py
#
# Existence checks shared by routers and services.

from enum import Enum

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import BusinessRuleViolation, NotFoundError


def get_or_404(db: Session, model, entity_id, label: str):
    instance = db.get(model, entity_id)

    if instance is None:
        raise NotFoundError(f"{label} not found")

    return instance


def require_existing(db: Session, model, entity_id, message: str):
    """Related entity referenced by a write must exist (400 otherwise)."""
    instance = db.get(model, entity_id)

    if instance is None:
        raise BusinessRuleViolation(message)

    return instance


def require_all_existing(db: Session, model, ids, message: str):
    distinct_ids = set(ids)

    found = (
        db.query(func.count(model.id))
        .filter(model.id.in_(distinct_ids))
        .scalar()
    )

    if found != len(distinct_ids):
        raise BusinessRuleViolation(message)


def apply_updates(instance, data) -> dict:
    """Copy the fields the client actually sent onto the ORM row."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    for field, value in changes.items():
        if isinstance(value, Enum):
            value = value.value
        setattr(instance, field, value)

    return changes
