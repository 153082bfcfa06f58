"""Customer timeline endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.timeline import CustomerEvent
from backend.app.models.user import User
from backend.app.schemas.timeline import CustomerEventRead
from backend.app.services.customers import get_customer
from backend.app.services.visibility import ensure_can_view

router = APIRouter(prefix="/customers", tags=["timeline"])


@router.get("/{customer_id}/timeline", response_model=list[CustomerEventRead])
async def get_timeline(
    customer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    customer = get_customer(db, customer_id)
    ensure_can_view(current_user, customer)
    return (
        db.query(CustomerEvent)
        .filter(CustomerEvent.customer_id == customer_id)
        .order_by(CustomerEvent.created_at.asc(), CustomerEvent.id.asc())
        .all()
    )
