"""Customer schemas for create, update, lifecycle actions and read operations."""

from datetime import date, datetime
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel

from backend.app.schemas.note import NoteRead
from backend.app.schemas.user import UserSummary


CustomerStatus = Literal[
    "new",
    "interested",
    "visit-possible",
    "visit-done",
    "sellable",
    "short-process",
    "long-process",
    "closed",
]
CustomerPriority = Literal["low", "medium", "high"]
CustomerSource = Literal["website", "referral", "social_media", "walk_in", "call", "other"]
PropertyType = Literal["land", "building", "house", "apartment", "commercial", "villa", "penthouse"]

# Form inputs send "" for cleared fields
_BLANK_AS_NONE = ("email", "zone", "thana", "assigned_agent_id", "next_follow_up_date")


class BudgetIn(BaseModel):
    """Raw budget bounds; coerced to non-negative numbers by the customer service."""

    min: Union[float, str, None] = None
    max: Union[float, str, None] = None


class BudgetRead(BaseModel):
    min: float = 0
    max: float = 0


class CustomerPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator(*_BLANK_AS_NONE, mode="before", check_fields=False)
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CustomerCreate(CustomerPayload):
    """Schema for customer creation requests."""

    name: str
    phone: str
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    status: CustomerStatus = "new"
    priority: CustomerPriority = "medium"
    zone: Optional[str] = None
    thana: Optional[str] = None
    assigned_agent_id: Optional[int] = None
    budget: Optional[BudgetIn] = None
    preferred_location: Union[list[str], str, None] = None
    property_type: list[PropertyType] = []
    interested_properties: Optional[str] = None
    interested_property_code: Optional[str] = None
    source: CustomerSource = "website"
    referred_by: Optional[str] = None
    requirements: Optional[str] = None
    next_follow_up_date: Optional[date] = None
    next_follow_up_action: Optional[str] = None


class CustomerUpdate(CustomerPayload):
    """Schema for partial customer updates. ``added_by`` is deliberately absent."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    status: Optional[CustomerStatus] = None
    priority: Optional[CustomerPriority] = None
    zone: Optional[str] = None
    thana: Optional[str] = None
    assigned_agent_id: Optional[int] = None
    budget: Optional[BudgetIn] = None
    preferred_location: Union[list[str], str, None] = None
    property_type: Optional[list[PropertyType]] = None
    interested_properties: Optional[str] = None
    interested_property_code: Optional[str] = None
    source: Optional[CustomerSource] = None
    referred_by: Optional[str] = None
    requirements: Optional[str] = None
    next_follow_up_date: Optional[date] = None
    next_follow_up_action: Optional[str] = None


class CustomerMove(CustomerPayload):
    zone: Optional[str] = None
    thana: Optional[str] = None
    agent_id: Optional[int] = None

    @field_validator("agent_id", mode="before")
    @classmethod
    def _blank_agent(cls, value: Any) -> Any:
        return None if value == "" else value


class CustomerClose(BaseModel):
    reason: Optional[str] = None


class CustomerRead(BaseModel):
    """Schema for customer responses; ``is_follow_up_due`` is computed on every read."""

    id: int
    name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    status: str
    priority: str
    zone: Optional[str] = None
    thana: Optional[str] = None
    assigned_agent: Optional[UserSummary] = None
    budget: BudgetRead
    preferred_location: list[str] = []
    property_type: list[str] = []
    interested_properties: Optional[str] = None
    interested_property_code: Optional[str] = None
    source: str
    referred_by: Optional[str] = None
    requirements: Optional[str] = None
    next_follow_up_date: Optional[date] = None
    next_follow_up_action: Optional[str] = None
    is_follow_up_due: bool
    last_contact_date: Optional[datetime] = None
    agent_closed: bool
    close_reason: Optional[str] = None
    closed_by: Optional[UserSummary] = None
    closed_at: Optional[datetime] = None
    moved_from_agent_id: Optional[int] = None
    moved_by_id: Optional[int] = None
    moved_at: Optional[datetime] = None
    added_by: UserSummary
    notes: list[NoteRead] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CustomerPage(BaseModel):
    customers: list[CustomerRead]
    total: int
    total_pages: int
    current_page: int


class DueCount(BaseModel):
    count: int
