from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class LoginRequest(BaseModel):
    """Login request schema."""
    email: str = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class RegisterRequest(BaseModel):
    """Registration request schema."""
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=6, description="Password (minimum 6 characters)")


class UserResponse(BaseModel):
    """User response schema (without password)."""
    id: int
    email: str
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Authentication response schema."""
    user: UserResponse
    message: str


class LoginResponse(AuthResponse):
    """Login response - carries the bearer token for later requests."""
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
