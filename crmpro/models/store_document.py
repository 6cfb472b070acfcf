"""Store document model: the single unit of persistence."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from crmpro.models.user import User


class StoreDocument(BaseModel):
    """All persisted state: users and the (unused) contacts list."""

    users: List[User] = Field(default_factory=list)
    contacts: List[Dict[str, Any]] = Field(default_factory=list)

    def find_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users if u.email == email), None)

    def find_user_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_verification_token(self, token: str) -> Optional[User]:
        return next(
            (u for u in self.users if u.verification_token is not None and u.verification_token == token),
            None,
        )

    def to_record(self) -> dict:
        return {
            "users": [u.to_record() for u in self.users],
            "contacts": list(self.contacts),
        }
