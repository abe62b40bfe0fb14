"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response; never includes the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None
    team: str | None
    position: str | None
    created_at: datetime | None = None


class SignupResponse(BaseModel):
    """Signup confirmation."""

    message: str
    user: UserResponse


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse
