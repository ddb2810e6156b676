from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from ..utils.constants import AppConstants


class FoodChoice(Base):
    __tablename__ = "food_choices"

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String(AppConstants.MAX_LABEL_LENGTH), nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    rsvp_children = relationship(
        "RsvpChild", back_populates="food_choice", passive_deletes="all"
    )
