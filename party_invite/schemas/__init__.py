from .common import OkResponse, HealthResponse
from .event_settings import EventSettingsUpdate, EventSettingsResponse
from .food_choice import (
    FoodChoiceCreate,
    FoodChoiceUpdate,
    FoodChoiceOption,
    FoodChoiceResponse,
)
from .invite import InviteResponse, InviteImportResponse
from .rsvp import RsvpCreate, RsvpChildCreate, RsvpResponse, RsvpChildResponse
from .metrics import MetricsResponse, FoodTotal
from .auth import LoginRequest, LoginResponse

__all__ = [
    "OkResponse",
    "HealthResponse",
    "EventSettingsUpdate",
    "EventSettingsResponse",
    "FoodChoiceCreate",
    "FoodChoiceUpdate",
    "FoodChoiceOption",
    "FoodChoiceResponse",
    "InviteResponse",
    "InviteImportResponse",
    "RsvpCreate",
    "RsvpChildCreate",
    "RsvpResponse",
    "RsvpChildResponse",
    "MetricsResponse",
    "FoodTotal",
    "LoginRequest",
    "LoginResponse",
]
