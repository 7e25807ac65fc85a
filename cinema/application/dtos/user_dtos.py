"""User and authentication DTOs for API layer"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional, List
from datetime import datetime


class CreateUserDto(BaseModel):
    """DTO for user registration"""
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(..., min_length=6, max_length=72)
    email: EmailStr
    mobile_number: str = Field(..., pattern=r"^\+?[0-9]{7,15}$")
    full_name: Optional[str] = Field(default=None, max_length=255)


class LoginUserDto(BaseModel):
    """DTO for user login"""
    username: str
    password: str


class VerifyCodeDto(BaseModel):
    """DTO for submitting a one-time code"""
    username: str
    code: str = Field(..., min_length=1, max_length=12)


class ResendOtpDto(BaseModel):
    """DTO for requesting a new one-time code"""
    username: str
    type: str = Field(..., min_length=1, description='"email" or "mobile"')


class RefreshTokenDto(BaseModel):
    """DTO for refresh token request"""
    refresh_token: str


class LogoutDto(BaseModel):
    """DTO for logout request"""
    refresh_token: Optional[str] = None


class SessionBundleDto(BaseModel):
    """Tokens and verification state returned on login"""
    token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int
    username: str
    email_verified: bool
    mobile_verified: bool


class AccessTokenDto(BaseModel):
    """DTO for a refreshed access token"""
    access_token: str
    token_type: str = "Bearer"


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class UserDto(BaseModel):
    """DTO for user response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    mobile_number: str
    full_name: Optional[str] = None
    email_verified: bool
    mobile_verified: bool
    active: bool
    roles: List[str]
    created_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user):
        """Convert domain entity to DTO"""
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email,
            mobile_number=user.mobile_number,
            full_name=user.full_name,
            email_verified=user.email_verified,
            mobile_verified=user.mobile_verified,
            active=user.active,
            roles=sorted(role.value for role in user.roles),
            created_at=user.created_at,
            last_login_at=user.last_login_at
        )
