from typing import Optional

from pydantic import Field

from app.schemas.base_schema import CamelModel, UtcDatetime


# Family sign-up: creates the family and its first (admin) caretaker
class RegisterRequest(CamelModel):
    family_name: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    login_id: str = Field(..., min_length=2, max_length=32)
    pin: str = Field(..., min_length=4, max_length=10)
    type: Optional[str] = None

class LoginRequest(CamelModel):
    family_id: int
    login_id: str
    pin: str

class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    caretaker_id: int
    name: str
    role: str
    family_id: int
    issued_at: UtcDatetime
    expires_at: UtcDatetime

class SessionResponse(CamelModel):
    session_id: str
    caretaker_id: int
    name: str
    role: str
    family_id: int
    issued_at: UtcDatetime
    expires_at: UtcDatetime
