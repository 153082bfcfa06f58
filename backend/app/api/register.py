"""Handles staff self-registration for the Realty CRM."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import engine, get_db
from backend.app.models.user import ROLE_AGENT, ROLE_SUPER_ADMIN, User
from backend.app.schemas.user import UserCreate, UserRead

Base.metadata.create_all(bind=engine)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    existing = db.query(User).filter(User.email == user_in.email).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")
    # The very first account bootstraps the system as super admin
    role = ROLE_SUPER_ADMIN if db.query(User).count() == 0 else ROLE_AGENT
    hashed_password = get_password_hash(user_in.password)  # Hash password before storing
    user = User(email=user_in.email, name=user_in.name, hashed_password=hashed_password, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s as %s", user.id, role)
    return user
