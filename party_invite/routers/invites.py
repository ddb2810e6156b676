from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional

from ..config import Settings
from ..database import get_db
from ..dependencies.permissions import get_settings
from ..schemas.invite import InviteImportResponse, InviteResponse
from ..services.errors import ValidationError
from ..services.invite_service import InviteService
from ..utils.router_helpers import handle_service_errors

admin_router = APIRouter(tags=["admin"])


@admin_router.get("/invites", response_model=List[InviteResponse])
@handle_service_errors
async def list_invites(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return InviteService(db, settings.INVITE_NAME_MATCH).list_invites()


@admin_router.post("/invites/import", response_model=InviteImportResponse)
@handle_service_errors
async def import_invites(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Import a CSV guest list (invite_name or name column, optional phone)"""
    if file is None:
        raise ValidationError("Missing file")

    content = await file.read()
    result = InviteService(db, settings.INVITE_NAME_MATCH).import_invites(content)
    return result.as_dict()
