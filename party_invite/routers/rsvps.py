from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ..config import Settings
from ..database import get_db
from ..dependencies.permissions import get_settings
from ..schemas.common import OkResponse
from ..schemas.rsvp import RsvpCreate, RsvpResponse
from ..services.rsvp_service import ChildInput, RsvpService
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["rsvp"])
admin_router = APIRouter(tags=["admin"])


@router.post("/rsvp", response_model=OkResponse)
@handle_service_errors
async def submit_rsvp(
    rsvp_data: RsvpCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Record one household's RSVP with a meal choice per child"""
    service = RsvpService(db, phone_required=settings.RSVP_PHONE_REQUIRED)
    service.submit_rsvp(
        invite_name_entered=rsvp_data.invite_name_entered,
        phone=rsvp_data.phone,
        children=[
            ChildInput(
                child_name=child.child_name,
                food_choice_id=child.food_choice_id,
                has_dietary_requirements=child.has_dietary_requirements,
                dietary_requirements=child.dietary_requirements,
            )
            for child in rsvp_data.children
        ],
    )
    return OkResponse()


@admin_router.get("/rsvps", response_model=List[RsvpResponse])
@handle_service_errors
async def list_rsvps(db: Session = Depends(get_db)):
    """Every RSVP, newest first, with children and their food labels"""
    return RsvpService(db).list_rsvps()
