# party_invite/dependencies/__init__.py

from .permissions import get_current_admin, get_settings

__all__ = [
    "get_current_admin",
    "get_settings",
]
