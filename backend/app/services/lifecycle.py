"""Customer lifecycle: territory moves, agent close/reopen and follow-up due-ness.

``status`` itself is a free-choice label and any value may follow any other;
the only guarded state machine here is ``agent_closed``.
"""

import logging

from sqlalchemy.orm import Session

from backend.app.core.errors import Forbidden, InvalidState, ValidationError
from backend.app.core.time import local_today, utc_now
from backend.app.models.customer import Customer
from backend.app.models.user import ROLE_AGENT, User
from backend.app.services.customers import resolve_agent
from backend.app.services.timeline import log_event
from backend.app.services.visibility import VIEW_MY, filter_closed, owns, scope_customers

logger = logging.getLogger(__name__)


def move_customer(
    db: Session,
    customer: Customer,
    caller: User,
    zone: str | None = None,
    thana: str | None = None,
    agent_id: int | None = None,
) -> Customer:
    """Rewrite territory and assignment in one update.

    ``agent_id`` is not checked against the eligible agents for the new
    territory; admins may force any assignment.
    """
    if customer.agent_closed:
        raise InvalidState("Closed customers must be reopened before they can be moved")
    if caller.role == ROLE_AGENT and not owns(caller, customer):
        logger.warning("Agent %s denied move of customer %s", caller.id, customer.id)
        raise Forbidden("Not authorized to move this customer")

    zone = (zone or "").strip() or None
    thana = (thana or "").strip() or None
    if zone is None and thana is None and agent_id is None:
        raise ValidationError("Provide a zone, thana or agent to move the customer to")

    changes = []
    if zone is not None:
        customer.zone = zone
        changes.append(f"zone {zone}")
    if thana is not None:
        customer.thana = thana
        changes.append(f"thana {thana}")
    if agent_id is not None:
        agent = resolve_agent(db, agent_id)
        previous_agent_id = customer.assigned_agent_id
        if previous_agent_id is not None and previous_agent_id != agent.id:
            customer.moved_from_agent_id = previous_agent_id
            customer.moved_by_id = caller.id
            customer.moved_at = utc_now()
        customer.assigned_agent_id = agent.id
        changes.append(f"agent {agent.id}")
    customer.updated_at = utc_now()

    log_event(db, customer.id, caller.id, "customer_moved", "Moved to " + ", ".join(changes))
    db.commit()
    db.refresh(customer)
    logger.info("Customer %s moved by user %s: %s", customer.id, caller.id, ", ".join(changes))
    return customer


def agent_close_customer(db: Session, customer: Customer, reason: str | None, caller: User) -> Customer:
    reason = (reason or "").strip()
    if not reason:
        raise ValidationError("A reason is required to close a customer")
    if customer.agent_closed:
        raise InvalidState("Customer is already closed")
    if caller.role == ROLE_AGENT and not owns(caller, customer):
        logger.warning("Agent %s denied close of customer %s", caller.id, customer.id)
        raise Forbidden("Not authorized to close this customer")

    now = utc_now()
    customer.agent_closed = True
    customer.close_reason = reason
    customer.closed_by_id = caller.id
    customer.closed_at = now
    customer.status = "closed"
    customer.updated_at = now

    log_event(db, customer.id, caller.id, "customer_closed", f"Closed: {reason}")
    db.commit()
    db.refresh(customer)
    logger.info("Customer %s closed by user %s", customer.id, caller.id)
    return customer


def reopen_customer(db: Session, customer: Customer, caller: User) -> Customer:
    """Return a closed customer to the active pipeline, keeping the close history."""
    if not caller.is_admin:
        logger.warning("User %s (%s) denied reopen of customer %s", caller.id, caller.role, customer.id)
        raise Forbidden("Only admins can reopen customers")
    if not customer.agent_closed:
        raise InvalidState("Customer is not closed")

    customer.agent_closed = False
    customer.status = "new"
    customer.updated_at = utc_now()

    log_event(db, customer.id, caller.id, "customer_reopened", "Customer reopened")
    db.commit()
    db.refresh(customer)
    logger.info("Customer %s reopened by user %s", customer.id, caller.id)
    return customer


def _due_query(db: Session, caller: User):
    query = scope_customers(db.query(Customer), caller, VIEW_MY)
    query = filter_closed(query)
    return query.filter(
        Customer.next_follow_up_date.isnot(None),
        Customer.next_follow_up_date <= local_today(),
    )


def due_follow_ups(db: Session, caller: User) -> list[Customer]:
    return _due_query(db, caller).order_by(Customer.next_follow_up_date.asc(), Customer.id.asc()).all()


def count_due_follow_ups(db: Session, caller: User) -> int:
    return _due_query(db, caller).count()
