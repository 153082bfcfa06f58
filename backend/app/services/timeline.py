"""Timeline services for logging customer events."""

from backend.app.models.timeline import CustomerEvent


def log_event(db, customer_id: int, actor_id: int, event_type: str, description: str) -> CustomerEvent:
    # Added to the caller's transaction; committed together with the mutation it records
    event = CustomerEvent(customer_id=customer_id, actor_id=actor_id, event_type=event_type, description=description)
    db.add(event)
    return event
