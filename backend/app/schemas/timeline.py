"""Timeline event schemas for customer activity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CustomerEventRead(BaseModel):
    id: int
    actor_id: int
    event_type: str
    description: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
