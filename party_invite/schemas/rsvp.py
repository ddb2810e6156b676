from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime


class RsvpChildCreate(BaseModel):
    # Kept loose so the service reports missing names and bad ids as 400s
    child_name: Optional[str] = None
    food_choice_id: Optional[Union[int, str]] = None
    has_dietary_requirements: bool = False
    dietary_requirements: Optional[str] = Field(None, max_length=1000)


class RsvpCreate(BaseModel):
    invite_name_entered: Optional[str] = None
    phone: Optional[str] = None
    children: List[RsvpChildCreate] = Field(default_factory=list)


class RsvpChildResponse(BaseModel):
    id: int
    child_name: str
    food_choice_id: int
    food_choice_label: Optional[str] = None
    has_dietary_requirements: bool
    dietary_requirements: Optional[str] = None

    class Config:
        from_attributes = True


class RsvpResponse(BaseModel):
    id: int
    invite_name_entered: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    children: List[RsvpChildResponse]

    class Config:
        from_attributes = True
