"""User data model for CRMPro."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from crmpro.models.constants import DEFAULT_PLAN


class User(BaseModel):
    """Persisted user record.

    Field aliases match the camelCase keys of the store document. Unknown keys
    are kept so that fields written into the store by other tools survive a
    whole-document rewrite.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Unique user identifier (UUID v4)")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address, unique among users")
    company: str = Field(..., description="Company name")
    phone: Optional[str] = Field(None, description="Phone number")
    plan: str = Field(DEFAULT_PLAN, description="Subscription plan name")
    verified: bool = Field(False, description="Whether the email address is verified")
    verification_token: Optional[str] = Field(
        None, alias="verificationToken", description="Token expected by the verify endpoint"
    )
    # Plaintext; never set by registration.
    password: Optional[str] = Field(None, description="Password compared at login")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    trial_ends_at: datetime = Field(..., alias="trialEndsAt", description="End of the trial window")
    verified_at: Optional[datetime] = Field(None, alias="verifiedAt", description="Verification timestamp")

    def to_record(self) -> dict:
        """Serialize to the JSON shape stored on disk and returned by the API."""
        return self.model_dump(mode="json", by_alias=True)


class UserSummary(BaseModel):
    """Public projection returned by registration."""
    id: str
    name: str
    email: str
    plan: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=user.id, name=user.name, email=user.email, plan=user.plan)


class UserProfile(BaseModel):
    """Public projection returned by login."""
    id: str
    name: str
    email: str
    company: str
    plan: str

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            company=user.company,
            plan=user.plan,
        )
