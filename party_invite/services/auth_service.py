from sqlalchemy.orm import Session
from typing import Optional
from datetime import timedelta
from dataclasses import dataclass
import logging

from ..config import Settings
from ..models.admin import Admin
from ..utils.constants import Messages
from ..utils.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from ..utils.validation import ValidationHelpers
from .errors import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminIdentity:
    id: int
    email: str


class AuthService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def authenticate(self, email: Optional[str], password: Optional[str]) -> Admin:
        email = ValidationHelpers.clean_text(email)
        if not email or not password:
            raise ValidationError("Missing credentials")

        admin = self.db.query(Admin).filter(Admin.email == email).first()
        if not admin or not verify_password(password, admin.password_hash):
            logger.warning(f"Failed admin login for {email}")
            raise AuthenticationError(Messages.INVALID_CREDENTIALS)

        return admin

    def issue_token(self, admin: Admin) -> str:
        return create_access_token(
            {"sub": str(admin.id), "email": admin.email},
            secret=self.settings.JWT_SECRET,
            algorithm=self.settings.JWT_ALGORITHM,
            expires_delta=self.token_lifetime,
        )

    @property
    def token_lifetime(self) -> timedelta:
        return timedelta(days=self.settings.ACCESS_TOKEN_EXPIRE_DAYS)

    def identify(self, token: str) -> AdminIdentity:
        """Admin behind a bearer token, or AuthenticationError"""
        payload = decode_access_token(
            token, self.settings.JWT_SECRET, self.settings.JWT_ALGORITHM
        )
        if not payload:
            raise AuthenticationError(Messages.INVALID_TOKEN)

        admin_id = ValidationHelpers.parse_positive_int(payload.get("sub"))
        if admin_id is None:
            raise AuthenticationError(Messages.INVALID_TOKEN)

        admin = self.db.get(Admin, admin_id)
        if not admin:
            raise AuthenticationError(Messages.INVALID_TOKEN)

        return AdminIdentity(id=admin.id, email=admin.email)

    def seed_admin(self, email: str, password: str) -> Admin:
        """Create an admin, or reset the password of an existing one"""
        email = ValidationHelpers.clean_text(email)
        if not email or not password:
            raise ValidationError("Email and password are required")

        password_hash = get_password_hash(password)
        admin = self.db.query(Admin).filter(Admin.email == email).first()
        if admin:
            admin.password_hash = password_hash
        else:
            admin = Admin(email=email, password_hash=password_hash)
            self.db.add(admin)

        self.db.commit()
        self.db.refresh(admin)
        return admin
