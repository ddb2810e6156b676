import re
from typing import Any, Optional

from .constants import InviteNameMatch

_WHITESPACE_RUN = re.compile(r"\s+")


class ValidationHelpers:
    @staticmethod
    def clean_text(value: Any) -> Optional[str]:
        """Strip a text value; blank or missing values become None"""
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None

    @staticmethod
    def parse_positive_int(value: Any) -> Optional[int]:
        """Parse ints and digit strings; returns None for anything else"""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value if value > 0 else None
        if isinstance(value, str) and value.strip().isdecimal():
            parsed = int(value.strip())
            return parsed if parsed > 0 else None
        return None

    @staticmethod
    def invite_name_key(name: str, mode: InviteNameMatch) -> str:
        """
        Deduplication key for an invite name.

        exact:      the trimmed name as-is (case-sensitive)
        whitespace: inner whitespace runs collapsed to one space
        casefold:   whitespace collapsed and case-folded
        """
        key = name.strip()
        if mode == InviteNameMatch.EXACT:
            return key
        key = _WHITESPACE_RUN.sub(" ", key)
        if mode == InviteNameMatch.CASEFOLD:
            key = key.casefold()
        return key

    @staticmethod
    def validate_length(value: Optional[str], max_length: int) -> bool:
        """Validate that a text value fits its column (None always fits)"""
        if value is None:
            return True
        return len(value) <= max_length
