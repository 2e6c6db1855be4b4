from pydantic import BaseModel, EmailStr, Field

from app.schemas.user import UserRead


class LoginRequest(BaseModel):
    """Email/password login request"""
    email: EmailStr
    password: str = Field(..., max_length=128)


class LoginResponse(BaseModel):
    """Issued credential plus the authenticated user"""
    user: UserRead
    token: str
    token_type: str = "bearer"
