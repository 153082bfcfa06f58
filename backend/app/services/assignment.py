"""Eligible-agent resolution for customer (re)assignment.

The resolver is advisory: it narrows the choices offered to a caller, and the
final agent is always picked explicitly. Territory matching is exact string
equality on the agent's own ``assigned_zone``/``assigned_thana``; it does not
consult the territory directory, so a misspelled zone simply matches nobody.
"""

from typing import Iterable, TypeVar

from sqlalchemy.orm import Session

from backend.app.models.user import STAFF_ROLES, User

T = TypeVar("T")

# Any active staff member may hold a customer, super admins included
ASSIGNABLE_ROLES = STAFF_ROLES


def _unset(value: str | None) -> bool:
    return value is None or value == ""


def eligible_agents(agents_pool: Iterable[T], zone: str | None = None, thana: str | None = None) -> list[T]:
    """Return the active members of ``agents_pool`` working in ``zone``/``thana``.

    An agent without a territory only qualifies when neither filter is given.
    """
    eligible = []
    for agent in agents_pool:
        if getattr(agent, "is_active", True) is False:
            continue
        if not _unset(zone) and getattr(agent, "assigned_zone", None) != zone:
            continue
        if not _unset(thana) and getattr(agent, "assigned_thana", None) != thana:
            continue
        eligible.append(agent)
    return eligible


def agent_pool(db: Session) -> list[User]:
    return (
        db.query(User)
        .filter(User.role.in_(ASSIGNABLE_ROLES))
        .order_by(User.name.asc(), User.id.asc())
        .all()
    )
