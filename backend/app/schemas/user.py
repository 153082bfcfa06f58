"""User schemas used for registration, staff administration and responses."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr


StaffRole = Literal["super_admin", "admin", "agent"]


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    name: Optional[str] = None


class UserSummary(BaseModel):
    id: int
    name: Optional[str] = None
    email: EmailStr
    role: StaffRole

    model_config = ConfigDict(from_attributes=True)


class UserRead(UserSummary):
    phone: Optional[str] = None
    is_active: bool
    assigned_zone: Optional[str] = None
    assigned_thana: Optional[str] = None
    created_at: Optional[datetime] = None


class AdminUserCreate(BaseModel):
    email: EmailStr
    password: str
    name: Optional[str] = None
    phone: Optional[str] = None
    role: StaffRole = "agent"
    is_active: bool = True
    assigned_zone: Optional[str] = None
    assigned_thana: Optional[str] = None


class AdminUserUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[StaffRole] = None
    is_active: Optional[bool] = None
    assigned_zone: Optional[str] = None
    assigned_thana: Optional[str] = None
