"""Data models for CRMPro."""

from crmpro.models.user import User, UserSummary, UserProfile
from crmpro.models.store_document import StoreDocument
from crmpro.models.contact import EnterpriseContactRequest

__all__ = [
    "User",
    "UserSummary",
    "UserProfile",
    "StoreDocument",
    "EnterpriseContactRequest",
]
