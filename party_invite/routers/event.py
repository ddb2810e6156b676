from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.event_settings import EventSettingsResponse, EventSettingsUpdate
from ..services.event_settings_service import EventSettingsService
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["event"])
admin_router = APIRouter(tags=["admin"])


@router.get("/event", response_model=EventSettingsResponse)
@handle_service_errors
async def get_event(db: Session = Depends(get_db)):
    """Event details shown on the RSVP page"""
    return EventSettingsService(db).get_settings()


@admin_router.get("/event", response_model=EventSettingsResponse)
@handle_service_errors
async def get_event_admin(db: Session = Depends(get_db)):
    return EventSettingsService(db).get_settings()


@admin_router.put("/event", response_model=EventSettingsResponse)
@handle_service_errors
async def update_event(
    event_data: EventSettingsUpdate,
    db: Session = Depends(get_db),
):
    """Replace the event details (every field required)"""
    return EventSettingsService(db).update_settings(event_data)
