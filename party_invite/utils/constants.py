from enum import Enum


# Application Constants
class AppConstants:
    # File Upload
    MAX_UPLOAD_SIZE_MB = 5
    CSV_ENCODING = "utf-8-sig"

    # Invite import columns (header names are case-sensitive)
    INVITE_NAME_COLUMNS = ("invite_name", "name")
    INVITE_PHONE_COLUMN = "phone"

    # Column lengths (models and input checks share these)
    MAX_NAME_LENGTH = 200
    MAX_PHONE_LENGTH = 50
    MAX_LABEL_LENGTH = 100

    # Event settings
    EVENT_SETTINGS_ID = 1


class InviteNameMatch(str, Enum):
    """How imported invite names are compared for deduplication"""

    EXACT = "exact"
    WHITESPACE = "whitespace"
    CASEFOLD = "casefold"


# API Response Messages
class Messages:
    RSVP_SAVE_FAILED = "Failed to save RSVP"
    IMPORT_FAILED = "Failed to import invites"
    MISSING_AUTHORIZATION = "Missing authorization"
    INVALID_TOKEN = "Invalid token"
    INVALID_CREDENTIALS = "Invalid credentials"
    ERROR_SERVER = "An unexpected error occurred"


# Defaults for the singleton event_settings row
class DefaultEventSettings:
    TITLE = "Party"
    EVENT_DATE = "TBC"
    PARTY_TIME = "TBC"
    INTRO_TEXT = "Please let us know who is coming."
    LOCATION = "TBC"
