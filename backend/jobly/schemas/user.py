"""
User Schemas
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from typing import List, Optional

from jobly.schemas.base import CamelModel, reject_null


# Base schemas
class UserBase(CamelModel):
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: EmailStr


class UserCreate(UserBase):
    """User creation schema (admin only; may create admins)"""
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=72)
    is_admin: bool = False


class UserUpdate(CamelModel):
    """User update schema"""
    model_config = ConfigDict(extra="forbid")
    
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    password: Optional[str] = Field(default=None, min_length=5, max_length=72)
    email: Optional[EmailStr] = None

    @field_validator("first_name", "last_name", "password", "email")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class UserRead(CamelModel):
    """User without credentials"""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetail(UserRead):
    """User with the ids of jobs applied to"""
    applications: List[int] = []


class UserResponse(CamelModel):
    user: UserRead


class UserDetailResponse(CamelModel):
    user: UserDetail


class UserListResponse(CamelModel):
    users: List[UserRead]


class UserTokenResponse(CamelModel):
    user: UserRead
    token: str


class AppliedResponse(BaseModel):
    applied: int


# Auth schemas
class TokenResponse(BaseModel):
    """Token response schema"""
    token: str


class LoginRequest(BaseModel):
    """Login request schema"""
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1, max_length=72)


class RegisterRequest(UserBase):
    """Self-registration schema (never an admin)"""
    model_config = ConfigDict(extra="forbid")
    
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=72)
