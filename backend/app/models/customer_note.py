"""Note rows attached to a customer."""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class CustomerNote(Base):
    __tablename__ = "customer_notes"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    note = Column(Text, nullable=False)
    # Set only on rows imported from the previous system, whose text may be JSON-wrapped
    legacy = Column(Boolean, nullable=False, default=False)
    next_follow_up_date = Column(Date, nullable=True)
    added_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    edited_at = Column(DateTime(timezone=True), nullable=True)

    customer = relationship("Customer", back_populates="notes")
    added_by = relationship("User")
