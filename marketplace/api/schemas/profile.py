"""
Profile-related API schemas.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from marketplace.domain.value_objects.profile_type import ProfileType

from .common import TimestampMixin


class ProfileCreateRequest(BaseModel):
    """Signup request schema."""

    type: ProfileType
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6, max_length=128)
    profession: Optional[str] = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("Invalid email address")
        return v


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class ProfileModifyRequest(BaseModel):
    """Partial profile update. Omitted fields are left unchanged."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profession: Optional[str] = Field(None, max_length=100)
    type: Optional[ProfileType] = None


class ProfileResponse(TimestampMixin):
    """Profile response schema. Never carries the password hash."""

    id: UUID
    type: ProfileType
    first_name: str
    last_name: str
    email: str
    profession: Optional[str] = None
    balance: Decimal

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Profile plus the access token issued for it."""

    profile: ProfileResponse
    access_token: str
    token_type: str = "bearer"
