from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class InviteResponse(BaseModel):
    id: int
    invite_name: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class InviteImportResponse(BaseModel):
    inserted: int
    skipped: int
    missing_name: int
    duplicates: int
    malformed: int = 0
