import logging
import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.user import ROLE_SUPER_ADMIN, User

logger = logging.getLogger(__name__)

DEFAULT_DEV_PASSWORD = "Secret123!"
DEFAULT_DEV_SUPER_ADMIN = "admin@example.com"


def ensure_default_dev_super_admin(db: Session) -> None:
    """
    Create a default super admin for local development if it does not exist.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    existing = db.query(User).filter(User.email == DEFAULT_DEV_SUPER_ADMIN).first()
    if existing:
        return

    user = User(
        email=DEFAULT_DEV_SUPER_ADMIN,
        name="Super Admin",
        hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD),
        is_active=True,
        role=ROLE_SUPER_ADMIN,
    )
    db.add(user)
    db.commit()
    logger.info("Seeded default super admin %s", DEFAULT_DEV_SUPER_ADMIN)
