from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.constants import InviteNameMatch

DEFAULT_JWT_SECRET = "change_me"


class Settings(BaseSettings):
    """Runtime configuration, read from the environment (and .env)"""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    RELOAD: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./party_invite.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 30

    # Security
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Comma-separated list of allowed CORS origins
    FRONTEND_ORIGIN: str = "http://localhost:5173"

    # Invites and RSVPs
    INVITE_NAME_MATCH: InviteNameMatch = InviteNameMatch.EXACT
    RSVP_PHONE_REQUIRED: bool = False

    LOG_LEVEL: str = "INFO"

    @field_validator("INVITE_NAME_MATCH", mode="before")
    @classmethod
    def normalise_match_mode(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def FRONTEND_ORIGINS(self) -> List[str]:
        return [o.strip() for o in self.FRONTEND_ORIGIN.split(",") if o.strip()]

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET
