"""User and authentication Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignInRequest(BaseModel):
    """Schema for signing in."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Schema for the signed-in user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class SignInResponse(BaseModel):
    """Schema for sign-in response: the user and a session-bound token."""

    user: UserResponse
    token: str
