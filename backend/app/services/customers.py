"""Customer record store: creation, partial updates, deletion and listing.

Payloads arrive as plain dicts (``model_dump(exclude_unset=True)``) so that a
partial update only touches the fields the caller actually sent.
"""

import logging
import math
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.app.core.errors import NotFound, ValidationError
from backend.app.core.time import utc_now
from backend.app.models.customer import Customer
from backend.app.models.user import STAFF_ROLES, User
from backend.app.services.timeline import log_event
from backend.app.services.visibility import (
    VIEW_ALL,
    ensure_can_delete,
    ensure_can_edit,
    filter_closed,
    scope_customers,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

_OPTIONAL_TEXT_FIELDS = ("zone", "thana", "address", "referred_by", "interested_property_code")
_DEFAULTED_FIELDS = ("status", "priority", "source")


def get_customer(db: Session, customer_id: int) -> Customer:
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise NotFound("Customer not found")
    return customer


def resolve_agent(db: Session, agent_id: int) -> User:
    agent = db.query(User).filter(User.id == agent_id).first()
    if not agent or agent.role not in STAFF_ROLES:
        raise NotFound("Agent not found")
    return agent


def split_locations(value: Any) -> list[str]:
    """Split a comma-separated string (or list of them) into trimmed, non-empty names."""
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else [p for item in value for p in str(item).split(",")]
    return [part.strip() for part in parts if part.strip()]


def coerce_budget(value: Any) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Budget must be numeric")
    if math.isnan(amount) or math.isinf(amount):
        raise ValidationError("Budget must be numeric")
    return max(amount, 0.0)


def normalize_fields(db: Session, data: dict[str, Any]) -> dict[str, Any]:
    """Apply the shared create/update normalization to a raw payload."""
    values = dict(data)
    values.pop("added_by_id", None)
    values.pop("added_by", None)

    for field in ("name", "phone"):
        if field in values:
            text = (values[field] or "").strip()
            if not text:
                raise ValidationError(f"{field.capitalize()} is required")
            values[field] = text

    if "email" in values:
        values["email"] = (values["email"] or "").strip().lower() or None

    for field in _OPTIONAL_TEXT_FIELDS:
        if field in values and isinstance(values[field], str):
            values[field] = values[field].strip() or None

    for field in _DEFAULTED_FIELDS:
        if field in values and values[field] is None:
            values.pop(field)

    if "budget" in values:
        budget = values.pop("budget") or {}
        if "min" in budget:
            values["budget_min"] = coerce_budget(budget["min"])
        if "max" in budget:
            values["budget_max"] = coerce_budget(budget["max"])

    if "preferred_location" in values:
        values["preferred_location"] = split_locations(values["preferred_location"])
    if "property_type" in values:
        values["property_type"] = list(values["property_type"] or [])

    if values.get("assigned_agent_id") is not None:
        resolve_agent(db, values["assigned_agent_id"])
    return values


def create_customer(db: Session, data: dict[str, Any], caller: User) -> Customer:
    for field in ("name", "phone"):
        if not data.get(field):
            raise ValidationError(f"{field.capitalize()} is required")
    values = normalize_fields(db, data)
    values.setdefault("budget_min", 0.0)
    values.setdefault("budget_max", 0.0)
    customer = Customer(**values, added_by_id=caller.id)
    db.add(customer)
    db.flush()
    log_event(db, customer.id, caller.id, "customer_created", "Customer created")
    db.commit()
    db.refresh(customer)
    logger.info("Customer %s created by user %s", customer.id, caller.id)
    return customer


def update_customer(db: Session, customer: Customer, data: dict[str, Any], caller: User) -> Customer:
    ensure_can_edit(caller, customer)
    values = normalize_fields(db, data)
    old_status = customer.status
    changed_fields: list[str] = []
    for field, value in values.items():
        if getattr(customer, field) != value:
            setattr(customer, field, value)
            changed_fields.append(field)
    customer.updated_at = utc_now()

    if "status" in changed_fields:
        log_event(db, customer.id, caller.id, "status_changed", f"Status changed from {old_status} to {customer.status}")
    non_status_changes = [f for f in changed_fields if f != "status"]
    if non_status_changes:
        description = "Customer updated: " + "; ".join(f"{f} changed" for f in non_status_changes)
        log_event(db, customer.id, caller.id, "customer_updated", description)
    db.commit()
    db.refresh(customer)
    logger.info("Customer %s updated by user %s (%s)", customer.id, caller.id, ", ".join(changed_fields) or "no changes")
    return customer


def delete_customer(db: Session, customer: Customer, caller: User) -> None:
    """Remove the customer together with its notes and timeline. Irreversible."""
    ensure_can_delete(caller)
    customer_id = customer.id
    db.delete(customer)
    db.commit()
    logger.info("Customer %s deleted by user %s", customer_id, caller.id)


def _contains_pattern(token: str) -> str:
    # Typed % and _ match themselves, not any run or any character
    escaped = token.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def apply_search(query, search: str | None):
    if not search:
        return query
    for token in search.split():
        pattern = _contains_pattern(token)
        query = query.filter(
            or_(
                Customer.name.ilike(pattern, escape="\\"),
                Customer.phone.ilike(pattern, escape="\\"),
                Customer.email.ilike(pattern, escape="\\"),
            )
        )
    return query


def list_customers(
    db: Session,
    caller: User,
    *,
    view: str = VIEW_ALL,
    source_filter: str | None = None,
    search: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    closed: bool = False,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    if page < 1:
        raise ValidationError("page must be at least 1")
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

    query = scope_customers(db.query(Customer), caller, view, source_filter)
    query = filter_closed(query, closed)
    if status:
        query = query.filter(Customer.status == status)
    if priority:
        query = query.filter(Customer.priority == priority)
    query = apply_search(query, search)

    total = query.count()
    customers = (
        query.order_by(Customer.created_at.desc(), Customer.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return {
        "customers": customers,
        "total": total,
        "total_pages": math.ceil(total / limit),
        "current_page": page,
    }
