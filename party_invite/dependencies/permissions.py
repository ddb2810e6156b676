from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
import logging

from ..config import Settings
from ..database import get_db
from ..services.auth_service import AdminIdentity, AuthService
from ..services.errors import AuthenticationError
from ..utils.constants import Messages

security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AdminIdentity:
    """Resolve the bearer token to an admin, or reject with 401"""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=Messages.MISSING_AUTHORIZATION,
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return AuthService(db, settings).identify(credentials.credentials)
    except AuthenticationError as e:
        logger.warning(f"Rejected admin token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=Messages.INVALID_TOKEN,
            headers={"WWW-Authenticate": "Bearer"},
        )
