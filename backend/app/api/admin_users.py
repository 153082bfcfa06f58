"""Staff administration endpoints (the user directory agents are assigned from)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_admin
from backend.app.models.user import ROLE_AGENT, ROLE_SUPER_ADMIN, User
from backend.app.schemas.user import AdminUserCreate, AdminUserUpdate, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["admin"])


def _get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def _ensure_can_manage_role(current_admin: User, role: str) -> None:
    # Admins manage agents; only super admins hand out admin rights
    if current_admin.role != ROLE_SUPER_ADMIN and role != ROLE_AGENT:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only super admins can manage admin accounts")


@router.get("", response_model=list[UserRead])
async def list_users(db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    return db.query(User).order_by(User.id.asc()).all()


@router.post("", response_model=UserRead, status_code=201)
async def create_user(
    user_in: AdminUserCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    _ensure_can_manage_role(current_admin, user_in.role)
    if db.query(User).filter(User.email == user_in.email).first():
        raise HTTPException(status_code=400, detail="Email already registered")
    user = User(
        email=user_in.email,
        name=user_in.name,
        phone=user_in.phone,
        hashed_password=get_password_hash(user_in.password),
        role=user_in.role,
        is_active=user_in.is_active,
        assigned_zone=(user_in.assigned_zone or "").strip() or None,
        assigned_thana=(user_in.assigned_thana or "").strip() or None,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User %s (%s) created by admin %s", user.id, user.role, current_admin.id)
    return user


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    return _get_user(db, user_id)


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    update: AdminUserUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    user = _get_user(db, user_id)
    _ensure_can_manage_role(current_admin, user.role)
    if update.role is not None:
        _ensure_can_manage_role(current_admin, update.role)
    if user_id == current_admin.id and update.is_active is False:
        raise HTTPException(status_code=400, detail="Cannot deactivate your own account")
    if user_id == current_admin.id and update.role is not None and update.role != current_admin.role:
        raise HTTPException(status_code=400, detail="Cannot change your own role")

    values = update.model_dump(exclude_unset=True)
    for field in ("assigned_zone", "assigned_thana"):
        if field in values:
            values[field] = (values[field] or "").strip() or None
    for field, value in values.items():
        if value is None and field in ("role", "is_active"):
            continue
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user
