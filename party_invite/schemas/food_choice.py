from pydantic import BaseModel, Field
from typing import Optional


class FoodChoiceCreate(BaseModel):
    label: Optional[str] = Field(None, max_length=100)


class FoodChoiceUpdate(BaseModel):
    label: Optional[str] = Field(None, max_length=100)
    active: Optional[bool] = None


class FoodChoiceOption(BaseModel):
    """Public view: only what the RSVP form needs"""

    id: int
    label: str

    class Config:
        from_attributes = True


class FoodChoiceResponse(FoodChoiceOption):
    active: bool
