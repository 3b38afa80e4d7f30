"""
Pydantic schemas for users and authentication.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional


class UserRegisterRequest(BaseModel):
    """Request schema for self-registration. New users are never admins."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=72)  # bcrypt limit
    first_name: str = Field(..., min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=30, alias="lastName")
    email: EmailStr

    class Config:
        extra = "forbid"
        populate_by_name = True


class UserNewRequest(UserRegisterRequest):
    """Request schema for admins adding a user, optionally another admin."""
    is_admin: bool = Field(False, alias="isAdmin")


class UserUpdateRequest(BaseModel):
    """Partial profile update. Username and admin flag cannot change here."""
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30, alias="firstName")
    last_name: Optional[str] = Field(None, min_length=1, max_length=30, alias="lastName")
    email: Optional[EmailStr] = None

    @field_validator("password", "first_name", "last_name", "email")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    class Config:
        extra = "forbid"
        populate_by_name = True


class UserAuthRequest(BaseModel):
    """Request schema for POST /auth/token."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str


class UserResponse(BaseModel):
    """User profile response (no password)."""
    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    is_admin: bool = Field(..., alias="isAdmin")

    class Config:
        populate_by_name = True


class UserDetailResponse(UserResponse):
    """User profile with the ids of jobs applied to."""
    jobs: List[int] = []


class UserEnvelope(BaseModel):
    user: UserResponse


class UserDetailEnvelope(BaseModel):
    user: UserDetailResponse


class UserCreatedResponse(BaseModel):
    user: UserResponse
    token: str


class UserListEnvelope(BaseModel):
    users: List[UserResponse]


class AppliedResponse(BaseModel):
    applied: int
