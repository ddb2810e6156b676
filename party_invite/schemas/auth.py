from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
