from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from backend.app.db.base_class import Base

ROLE_SUPER_ADMIN = "super_admin"
ROLE_ADMIN = "admin"
ROLE_AGENT = "agent"

STAFF_ROLES = (ROLE_SUPER_ADMIN, ROLE_ADMIN, ROLE_AGENT)
ADMIN_ROLES = (ROLE_SUPER_ADMIN, ROLE_ADMIN)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    hashed_password = Column(String, nullable=True)
    role = Column(String(20), nullable=False, default=ROLE_AGENT)
    is_active = Column(Boolean, nullable=False, default=True)
    # Territory the user works in; matched by plain string equality
    assigned_zone = Column(String, nullable=True)
    assigned_thana = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES
