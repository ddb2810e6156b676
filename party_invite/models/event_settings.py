from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from ..database import Base


class EventSettings(Base):
    """Singleton row (id=1) describing the party"""

    __tablename__ = "event_settings"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    event_date = Column(String(100), nullable=False)  # free text, e.g. "Sat 12 July"
    party_time = Column(String(100), nullable=False)  # free text range
    intro_text = Column(Text, nullable=False)
    location = Column(String(300), nullable=False)

    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
