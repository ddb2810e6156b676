from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from ..utils.constants import AppConstants


class Rsvp(Base):
    __tablename__ = "rsvps"

    id = Column(Integer, primary_key=True, index=True)
    invite_name_entered = Column(String(AppConstants.MAX_NAME_LENGTH), nullable=False)
    phone = Column(String(AppConstants.MAX_PHONE_LENGTH), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Relationships
    children = relationship(
        "RsvpChild",
        back_populates="rsvp",
        cascade="all, delete-orphan",
        order_by="RsvpChild.id",
    )


class RsvpChild(Base):
    __tablename__ = "rsvp_children"

    id = Column(Integer, primary_key=True, index=True)
    child_name = Column(String(AppConstants.MAX_NAME_LENGTH), nullable=False)
    has_dietary_requirements = Column(Boolean, nullable=False, default=False)
    dietary_requirements = Column(Text, nullable=True)

    # Foreign Keys
    rsvp_id = Column(
        Integer, ForeignKey("rsvps.id", ondelete="CASCADE"), nullable=False, index=True
    )
    food_choice_id = Column(
        Integer,
        ForeignKey("food_choices.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    rsvp = relationship("Rsvp", back_populates="children")
    food_choice = relationship("FoodChoice", back_populates="rsvp_children")
