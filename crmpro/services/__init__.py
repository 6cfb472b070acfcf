"""Business logic for CRMPro."""

from crmpro.services.auth_service import AuthService, LoginResult
from crmpro.services.contact_service import record_enterprise_contact

__all__ = [
    "AuthService",
    "LoginResult",
    "record_enterprise_contact",
]
