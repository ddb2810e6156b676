from sqlalchemy.orm import Session
from typing import Optional
import logging

from ..models.event_settings import EventSettings
from ..schemas.event_settings import EventSettingsUpdate
from ..utils.constants import AppConstants, DefaultEventSettings
from ..utils.validation import ValidationHelpers
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "event_date", "party_time", "intro_text", "location")


class EventSettingsService:
    def __init__(self, db: Session):
        self.db = db

    def get_settings(self) -> EventSettings:
        settings = self.db.get(EventSettings, AppConstants.EVENT_SETTINGS_ID)
        if not settings:
            raise NotFoundError("Event settings have not been created")
        return settings

    def ensure_settings(self) -> EventSettings:
        """Create the singleton row with placeholder text if it is missing"""
        settings = self.db.get(EventSettings, AppConstants.EVENT_SETTINGS_ID)
        if settings:
            return settings

        settings = EventSettings(
            id=AppConstants.EVENT_SETTINGS_ID,
            title=DefaultEventSettings.TITLE,
            event_date=DefaultEventSettings.EVENT_DATE,
            party_time=DefaultEventSettings.PARTY_TIME,
            intro_text=DefaultEventSettings.INTRO_TEXT,
            location=DefaultEventSettings.LOCATION,
        )
        self.db.add(settings)
        self.db.commit()
        self.db.refresh(settings)
        logger.info("Created default event settings")
        return settings

    def update_settings(self, updates: EventSettingsUpdate) -> EventSettings:
        """Replace every event field; all of them are required"""
        values = {}
        for field in REQUIRED_FIELDS:
            value: Optional[str] = ValidationHelpers.clean_text(getattr(updates, field))
            if not value:
                raise ValidationError("Missing event details")
            values[field] = value

        settings = self.db.get(EventSettings, AppConstants.EVENT_SETTINGS_ID)
        if not settings:
            settings = EventSettings(id=AppConstants.EVENT_SETTINGS_ID, **values)
            self.db.add(settings)
        else:
            for field, value in values.items():
                setattr(settings, field, value)

        self.db.commit()
        self.db.refresh(settings)
        return settings
