"""Customer notes: add, edit and delete with author-or-admin checks.

Notes are stored and returned as plain strings, verbatim. Rows imported from the
previous system carry ``legacy=True`` and may hold the text wrapped one or more
times in ``{"note": ...}`` objects (serialized as JSON); only those rows are
unwrapped on read by ``extract_note_text``, and ``flatten_legacy_notes``
rewrites them for good.
"""

import json
import logging
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from backend.app.core.errors import Forbidden, NotFound, ValidationError
from backend.app.core.time import utc_now
from backend.app.models.customer import Customer
from backend.app.models.customer_note import CustomerNote
from backend.app.models.user import User
from backend.app.services.timeline import log_event
from backend.app.services.visibility import ensure_can_edit, ensure_can_view

logger = logging.getLogger(__name__)

_MAX_NOTE_DEPTH = 10
_TEXT_KEYS = ("note", "content", "text")


def _decode_wrapped(value: str) -> Any:
    stripped = value.strip()
    if not stripped.startswith("{"):
        return value
    try:
        decoded = json.loads(stripped)
    except ValueError:
        return value
    if isinstance(decoded, dict) and any(key in decoded for key in _TEXT_KEYS):
        return decoded
    return value


def extract_note_text(value: Any) -> str:
    """Return the plain text of a stored note, unwrapping legacy nested shapes."""
    for _ in range(_MAX_NOTE_DEPTH):
        if value is None:
            return ""
        if isinstance(value, str):
            decoded = _decode_wrapped(value)
            if decoded is value:
                return value
            value = decoded
            continue
        if isinstance(value, dict):
            value = next((value[key] for key in _TEXT_KEYS if key in value), None)
            continue
        return str(value)
    return ""


def flatten_legacy_notes(db: Session) -> int:
    """Rewrite legacy nested/JSON-wrapped notes as plain text and clear their legacy flag.

    Returns the number of rows whose text changed. Notes written through
    ``add_note``/``edit_note`` are never touched.
    """
    fixed = 0
    for row in db.query(CustomerNote).filter(CustomerNote.legacy.is_(True)).all():
        text = extract_note_text(row.note)
        if text != row.note:
            row.note = text
            fixed += 1
        row.legacy = False
    db.commit()
    logger.info("Flattened %d legacy note(s)", fixed)
    return fixed


def _clean_text(note: Any) -> str:
    if not isinstance(note, str):
        raise ValidationError("Note must be plain text")
    text = note.strip()
    if not text:
        raise ValidationError("Note is required")
    return text


def _ensure_can_modify(caller: User, note: CustomerNote) -> None:
    if note.added_by_id != caller.id and not caller.is_admin:
        logger.warning("User %s denied change to note %s", caller.id, note.id)
        raise Forbidden("Only the note's author or an admin can change this note")


def _ensure_can_touch_customer(caller: User, customer: Customer) -> None:
    # Note writes also move the customer's follow-up and contact dates
    if customer.agent_closed:
        ensure_can_edit(caller, customer)


def get_note(db: Session, customer: Customer, note_id: int) -> CustomerNote:
    note = (
        db.query(CustomerNote)
        .filter(CustomerNote.id == note_id, CustomerNote.customer_id == customer.id)
        .first()
    )
    if not note:
        raise NotFound("Note not found")
    return note


def list_notes(db: Session, customer: Customer, caller: User) -> list[CustomerNote]:
    ensure_can_view(caller, customer)
    return (
        db.query(CustomerNote)
        .filter(CustomerNote.customer_id == customer.id)
        .order_by(CustomerNote.added_at.desc(), CustomerNote.id.desc())
        .all()
    )


def _sync_follow_up(customer: Customer, follow_up: date, action: str | None, text: str) -> None:
    # The customer's follow-up mirrors the most recent note that scheduled one
    customer.next_follow_up_date = follow_up
    customer.next_follow_up_action = (action or "").strip() or text


def add_note(
    db: Session,
    customer: Customer,
    caller: User,
    note: Any,
    next_follow_up_date: date | None = None,
    next_follow_up_action: str | None = None,
) -> CustomerNote:
    ensure_can_view(caller, customer)
    _ensure_can_touch_customer(caller, customer)
    text = _clean_text(note)
    now = utc_now()
    row = CustomerNote(
        customer_id=customer.id,
        note=text,
        next_follow_up_date=next_follow_up_date,
        added_by_id=caller.id,
        added_at=now,
    )
    db.add(row)
    if next_follow_up_date is not None:
        _sync_follow_up(customer, next_follow_up_date, next_follow_up_action, text)
    customer.last_contact_date = now
    customer.updated_at = now
    db.flush()
    log_event(db, customer.id, caller.id, "note_added", f"Note added: {text[:40]}")
    db.commit()
    db.refresh(row)
    logger.info("Note %s added to customer %s by user %s", row.id, customer.id, caller.id)
    return row


def edit_note(
    db: Session,
    customer: Customer,
    note_id: int,
    caller: User,
    note: Any,
    next_follow_up_date: date | None = None,
    next_follow_up_action: str | None = None,
) -> CustomerNote:
    row = get_note(db, customer, note_id)
    _ensure_can_modify(caller, row)
    _ensure_can_touch_customer(caller, customer)
    text = _clean_text(note)
    now = utc_now()
    row.note = text
    row.legacy = False
    row.edited_at = now
    if next_follow_up_date is not None:
        row.next_follow_up_date = next_follow_up_date
        latest = (
            db.query(CustomerNote)
            .filter(CustomerNote.customer_id == customer.id)
            .order_by(CustomerNote.added_at.desc(), CustomerNote.id.desc())
            .first()
        )
        if latest is not None and latest.id == row.id:
            _sync_follow_up(customer, next_follow_up_date, next_follow_up_action, text)
    customer.updated_at = now
    log_event(db, customer.id, caller.id, "note_edited", f"Note edited: {text[:40]}")
    db.commit()
    db.refresh(row)
    logger.info("Note %s on customer %s edited by user %s", row.id, customer.id, caller.id)
    return row


def delete_note(db: Session, customer: Customer, note_id: int, caller: User) -> None:
    row = get_note(db, customer, note_id)
    _ensure_can_modify(caller, row)
    _ensure_can_touch_customer(caller, customer)
    db.delete(row)
    customer.updated_at = utc_now()
    log_event(db, customer.id, caller.id, "note_deleted", "Note deleted")
    db.commit()
    logger.info("Note %s on customer %s deleted by user %s", note_id, customer.id, caller.id)
