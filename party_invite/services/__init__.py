from .errors import (
    ServiceError,
    ValidationError,
    IntegrityViolationError,
    ConflictError,
    NotFoundError,
    AuthenticationError,
    PersistenceError,
)
from .rsvp_service import RsvpService, RsvpRecord, RsvpChildRecord, ChildInput
from .invite_service import InviteService, ImportResult
from .metrics_service import MetricsService, Metrics
from .event_settings_service import EventSettingsService
from .food_choice_service import FoodChoiceService
from .auth_service import AuthService, AdminIdentity

__all__ = [
    "ServiceError",
    "ValidationError",
    "IntegrityViolationError",
    "ConflictError",
    "NotFoundError",
    "AuthenticationError",
    "PersistenceError",
    "RsvpService",
    "RsvpRecord",
    "RsvpChildRecord",
    "ChildInput",
    "InviteService",
    "ImportResult",
    "MetricsService",
    "Metrics",
    "EventSettingsService",
    "FoodChoiceService",
    "AuthService",
    "AdminIdentity",
]
