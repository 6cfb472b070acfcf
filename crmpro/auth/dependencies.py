"""FastAPI dependencies for authentication."""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from crmpro.errors import Unauthorized

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """Extract the raw bearer token from the Authorization header.

    Raises:
        Unauthorized: If no bearer token was supplied
    """
    if not credentials or not credentials.credentials:
        raise Unauthorized("Token bulunamadı")
    return credentials.credentials
