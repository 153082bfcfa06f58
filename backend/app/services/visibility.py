"""Role-aware scoping of customer queries and per-record access checks.

List scoping lives in ``scope_customers``; reads and mutations of a single
record go through the ``ensure_*`` helpers instead.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.orm import Query

from backend.app.core.errors import Forbidden, ValidationError
from backend.app.models.customer import Customer
from backend.app.models.user import ROLE_AGENT, ROLE_SUPER_ADMIN, User

logger = logging.getLogger(__name__)

VIEW_ALL = "all"
VIEW_MY = "my"
VIEW_FOREIGN = "foreign"

SOURCE_ALL = "all"
SOURCE_ASSIGNED = "assigned"
SOURCE_SELF_ADDED = "self-added"
SOURCE_AGENT_ADDED = "agent-added"


def _agent_scope(query: Query, caller: User, source_filter: str | None) -> Query:
    if source_filter in (None, "", SOURCE_ALL):
        return query.filter(or_(Customer.assigned_agent_id == caller.id, Customer.added_by_id == caller.id))
    if source_filter == SOURCE_ASSIGNED:
        return query.filter(Customer.assigned_agent_id == caller.id, Customer.added_by_id != caller.id)
    if source_filter == SOURCE_SELF_ADDED:
        return query.filter(Customer.added_by_id == caller.id)
    raise ValidationError(f"Invalid sourceFilter for agents: {source_filter}")


def _admin_scope(query: Query, source_filter: str | None) -> Query:
    if source_filter in (None, "", SOURCE_ALL):
        return query
    if source_filter == SOURCE_AGENT_ADDED:
        agent_ids = select(User.id).where(User.role == ROLE_AGENT)
        return query.filter(Customer.added_by_id.in_(agent_ids))
    raise ValidationError(f"Invalid sourceFilter: {source_filter}")


def _foreign_scope(query: Query, caller: User) -> Query:
    if caller.role != ROLE_SUPER_ADMIN:
        logger.warning("User %s (%s) denied foreign customer listing", caller.id, caller.role)
        raise Forbidden("Only super admins can view foreign customers")
    query = query.filter(
        or_(Customer.assigned_agent_id.is_(None), Customer.assigned_agent_id != caller.id),
        Customer.added_by_id != caller.id,
    )
    if caller.assigned_zone:
        query = query.filter(or_(Customer.zone.is_(None), Customer.zone != caller.assigned_zone))
    return query


def scope_customers(query: Query, caller: User, view: str = VIEW_ALL, source_filter: str | None = None) -> Query:
    """Narrow ``query`` to the customers ``caller`` may list in ``view``."""
    if view == VIEW_FOREIGN:
        return _foreign_scope(query, caller)
    if caller.role == ROLE_AGENT:
        return _agent_scope(query, caller, source_filter)
    return _admin_scope(query, source_filter)


def filter_closed(query: Query, closed: bool = False) -> Query:
    """Active listings hide agent-closed customers; ``closed=True`` lists only those."""
    if closed:
        return query.filter(Customer.agent_closed.is_(True))
    return query.filter(Customer.agent_closed.is_(False))


def owns(caller: User, customer: Customer) -> bool:
    return customer.assigned_agent_id == caller.id or customer.added_by_id == caller.id


def can_view(caller: User, customer: Customer) -> bool:
    if caller.is_admin:
        return True
    # Agents are kept out of customers another agent is working
    return customer.assigned_agent_id in (None, caller.id) or customer.added_by_id == caller.id


def ensure_can_view(caller: User, customer: Customer) -> None:
    if not can_view(caller, customer):
        logger.warning("User %s denied access to customer %s", caller.id, customer.id)
        raise Forbidden("Not authorized to access this customer")


def ensure_can_edit(caller: User, customer: Customer) -> None:
    if not can_view(caller, customer):
        logger.warning("User %s denied update of customer %s", caller.id, customer.id)
        raise Forbidden("Not authorized to update this customer")
    if customer.agent_closed and not caller.is_admin:
        raise Forbidden("Only admins can edit a closed customer")


def ensure_can_delete(caller: User) -> None:
    if not caller.is_admin:
        logger.warning("User %s (%s) denied customer deletion", caller.id, caller.role)
        raise Forbidden("Only admins can delete customers")
