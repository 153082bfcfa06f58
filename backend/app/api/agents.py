"""Agent lookups for customer assignment."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.user import UserRead
from backend.app.services.assignment import agent_pool, eligible_agents

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("/eligible", response_model=list[UserRead])
async def list_eligible_agents(
    zone: str | None = None,
    thana: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # Advisory list; an empty result means no agent works in that territory
    return eligible_agents(agent_pool(db), zone, thana)
