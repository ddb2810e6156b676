from .event_settings import EventSettings
from .food_choice import FoodChoice
from .invite import Invite
from .rsvp import Rsvp, RsvpChild
from .admin import Admin


__all__ = [
    "EventSettings",
    "FoodChoice",
    "Invite",
    "Rsvp",
    "RsvpChild",
    "Admin",
]
