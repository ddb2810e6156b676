from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class EventSettingsBase(BaseModel):
    title: str
    event_date: str
    party_time: str
    intro_text: str
    location: str


class EventSettingsUpdate(BaseModel):
    # All five are required; blanks are rejected by the service with a 400
    title: Optional[str] = Field(None, max_length=200)
    event_date: Optional[str] = Field(None, max_length=100)
    party_time: Optional[str] = Field(None, max_length=100)
    intro_text: Optional[str] = None
    location: Optional[str] = Field(None, max_length=300)


class EventSettingsResponse(EventSettingsBase):
    id: int
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
