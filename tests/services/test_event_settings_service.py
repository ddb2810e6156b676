# tests/services/test_event_settings_service.py

import pytest

from party_invite.schemas.event_settings import EventSettingsUpdate
from party_invite.services.errors import NotFoundError, ValidationError
from party_invite.services.event_settings_service import EventSettingsService

EVENT = dict(
    title="Sam's 6th Birthday",
    event_date="Saturday 12 July",
    party_time="2pm - 4pm",
    intro_text="Come and bounce!",
    location="Village Hall",
)


def test_get_before_creation_is_not_found(db_session):
    with pytest.raises(NotFoundError):
        EventSettingsService(db_session).get_settings()


def test_ensure_settings_creates_singleton_once(db_session):
    service = EventSettingsService(db_session)

    first = service.ensure_settings()
    second = service.ensure_settings()

    assert first.id == second.id == 1


def test_update_replaces_every_field(db_session):
    service = EventSettingsService(db_session)
    service.ensure_settings()

    updated = service.update_settings(EventSettingsUpdate(**EVENT))

    assert updated.id == 1
    assert {field: getattr(updated, field) for field in EVENT} == EVENT


@pytest.mark.parametrize("field", sorted(EVENT))
def test_update_requires_every_field(db_session, field):
    service = EventSettingsService(db_session)
    service.ensure_settings()

    with pytest.raises(ValidationError, match="Missing event details"):
        service.update_settings(EventSettingsUpdate(**{**EVENT, field: "  "}))

    assert service.get_settings().title != EVENT["title"]
