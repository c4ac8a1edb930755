"""
User Schemas
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field
from typing import Optional, List


# Base schemas
class UserBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=25)
    first_name: str = Field(..., min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=30, alias="lastName")
    email: EmailStr


class RegisterRequest(UserBase):
    """Self-registration schema (never admin)"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    password: str = Field(..., min_length=5, max_length=20)


class UserCreate(RegisterRequest):
    """Admin user creation schema"""
    is_admin: bool = Field(False, alias="isAdmin")


class UserUpdate(BaseModel):
    """User update schema"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    first_name: Optional[str] = Field(None, min_length=1, max_length=30, alias="firstName")
    last_name: Optional[str] = Field(None, min_length=1, max_length=30, alias="lastName")
    password: Optional[str] = Field(None, min_length=5, max_length=20)
    email: Optional[EmailStr] = None


class UserResponse(UserBase):
    """User response schema"""
    is_admin: bool = Field(False, alias="isAdmin")


class UserWithJobs(UserResponse):
    """User with the ids of jobs applied to"""
    jobs: List[int] = []


class UserEnvelope(BaseModel):
    user: UserResponse


class UserDetailEnvelope(BaseModel):
    user: UserWithJobs


class UserListResponse(BaseModel):
    users: List[UserWithJobs]


class UserTokenResponse(BaseModel):
    user: UserResponse
    token: str


class ApplicationResponse(BaseModel):
    applied: int


# Auth schemas
class TokenResponse(BaseModel):
    """Token response schema"""
    token: str


class LoginRequest(BaseModel):
    """Login request schema"""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class CurrentUser(BaseModel):
    """Identity carried by a verified token"""
    username: str
    is_admin: bool = False
