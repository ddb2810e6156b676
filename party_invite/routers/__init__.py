# party_invite/routers/__init__.py

from . import auth
from . import event
from . import food_choices
from . import rsvps
from . import invites
from . import metrics

__all__ = [
    "auth",
    "event",
    "food_choices",
    "rsvps",
    "invites",
    "metrics",
]
