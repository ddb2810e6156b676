from .constants import AppConstants, InviteNameMatch, Messages
from .validation import ValidationHelpers

__all__ = [
    "AppConstants",
    "InviteNameMatch",
    "Messages",
    "ValidationHelpers",
]
