from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from ..database import Base
from ..utils.constants import AppConstants


class Invite(Base):
    """
    A name from the admin's guest list. Not linked to any RSVP: submissions
    carry the name as typed, so the two tables are counted independently.
    """

    __tablename__ = "invites"

    id = Column(Integer, primary_key=True, index=True)
    invite_name = Column(String(AppConstants.MAX_NAME_LENGTH), nullable=False, index=True)
    # invite_name normalised by the configured comparison, unique per list
    name_key = Column(String(AppConstants.MAX_NAME_LENGTH), nullable=False, unique=True)
    phone = Column(String(AppConstants.MAX_PHONE_LENGTH), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
