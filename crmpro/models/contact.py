"""Enterprise contact request model."""

from typing import Optional
from pydantic import BaseModel, Field


class EnterpriseContactRequest(BaseModel):
    """Request for an enterprise plan offer. Logged, never persisted."""
    name: Optional[str] = Field(None, description="Contact person")
    email: Optional[str] = Field(None, description="Contact email")
    company: Optional[str] = Field(None, description="Company name")
    phone: Optional[str] = Field(None, description="Contact phone")
    message: Optional[str] = Field(None, description="Free-form message")
