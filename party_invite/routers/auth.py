from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_db
from ..dependencies.permissions import get_settings
from ..schemas.auth import LoginRequest, LoginResponse
from ..services.auth_service import AuthService
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
@handle_service_errors
async def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange admin email and password for a bearer token"""
    auth_service = AuthService(db, settings)
    admin = auth_service.authenticate(login_data.email, login_data.password)

    return LoginResponse(
        token=auth_service.issue_token(admin),
        expires_in=int(auth_service.token_lifetime.total_seconds()),
    )
