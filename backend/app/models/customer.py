"""Customer (lead) model for the Realty CRM."""

from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import local_today, utc_now
from backend.app.db.base_class import Base
from backend.app.models.customer_note import CustomerNote


def is_follow_up_due(next_follow_up_date: date | None, today: date) -> bool:
    """Due when a follow-up date is set and falls on or before today. Time of day is ignored."""
    if next_follow_up_date is None:
        return False
    if isinstance(next_follow_up_date, datetime):
        next_follow_up_date = next_follow_up_date.date()
    return next_follow_up_date <= today


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    phone = Column(String(50), nullable=False, index=True)
    email = Column(String, nullable=True, index=True)
    address = Column(String, nullable=True)

    status = Column(String(20), nullable=False, default="new", index=True)
    priority = Column(String(10), nullable=False, default="medium", index=True)

    zone = Column(String, nullable=True, index=True)
    thana = Column(String, nullable=True)
    assigned_agent_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    budget_min = Column(Float, nullable=False, default=0)
    budget_max = Column(Float, nullable=False, default=0)
    preferred_location = Column(JSON, nullable=False, default=list)
    property_type = Column(JSON, nullable=False, default=list)
    interested_properties = Column(Text, nullable=True)
    interested_property_code = Column(String, nullable=True)
    source = Column(String(20), nullable=False, default="website")
    referred_by = Column(String, nullable=True)
    requirements = Column(Text, nullable=True)

    next_follow_up_date = Column(Date, nullable=True, index=True)
    next_follow_up_action = Column(String, nullable=True)
    last_contact_date = Column(DateTime(timezone=True), nullable=True)

    agent_closed = Column(Boolean, nullable=False, default=False, index=True)
    close_reason = Column(String, nullable=True)
    closed_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    closed_at = Column(DateTime(timezone=True), nullable=True)

    moved_from_agent_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    moved_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    moved_at = Column(DateTime(timezone=True), nullable=True)

    added_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    assigned_agent = relationship("User", foreign_keys=[assigned_agent_id])
    added_by = relationship("User", foreign_keys=[added_by_id])
    closed_by = relationship("User", foreign_keys=[closed_by_id])
    notes = relationship(
        "CustomerNote",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by=[CustomerNote.added_at.desc(), CustomerNote.id.desc()],
    )
    timeline = relationship("CustomerEvent", back_populates="customer", cascade="all, delete-orphan")

    @property
    def is_follow_up_due(self) -> bool:
        return is_follow_up_due(self.next_follow_up_date, local_today())

    @property
    def budget(self) -> dict:
        return {"min": self.budget_min or 0, "max": self.budget_max or 0}
