"""Request/response models for the CRMPro API.

Request fields are optional at the schema level; presence is checked by the
services so that missing fields answer 400 with the API's error body.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from crmpro.models.user import UserProfile, UserSummary


class RegisterRequest(BaseModel):
    """Request model for account registration."""
    name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Email address")
    company: Optional[str] = Field(None, description="Company name")
    phone: Optional[str] = Field(None, description="Phone number")
    plan: Optional[str] = Field(None, description="Plan name (defaults to the starter plan)")


class LoginRequest(BaseModel):
    """Request model for login."""
    email: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str
    timestamp: datetime


class RegisterResponse(MessageResponse):
    user: UserSummary


class LoginResponse(MessageResponse):
    token: str
    user: UserProfile


class CurrentUserResponse(BaseModel):
    """Full stored user record, password field included."""
    success: bool = True
    user: dict


class UsersResponse(BaseModel):
    success: bool = True
    users: List[dict]
