"""JWT session token generation and validation for CRMPro."""

import logging
import os
import jwt
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from crmpro.errors import Unauthorized

load_dotenv()

logger = logging.getLogger(__name__)

# JWT configuration
# The fallback secret is a known literal; set JWT_SECRET in any real deployment.
JWT_SECRET = os.getenv("JWT_SECRET", "crmpro-secret-key")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_DAYS = int(os.getenv("JWT_EXPIRATION_DAYS", "7"))


class SessionTokens:
    """Issues and verifies signed, time-limited session tokens.

    There is no revocation list and no refresh; expiry is the only way a
    token stops being accepted.
    """

    def __init__(
        self,
        secret: str = JWT_SECRET,
        algorithm: str = JWT_ALGORITHM,
        ttl: timedelta = timedelta(days=JWT_EXPIRATION_DAYS),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, claims: Dict[str, Any], ttl: Optional[timedelta] = None) -> str:
        """Sign claims into a token valid for ``ttl`` (default: 7 days).

        Args:
            claims: Payload to embed (e.g. userId, email)
            ttl: Validity window, overrides the instance default

        Returns:
            Encoded JWT token string
        """
        now = datetime.utcnow()
        payload = {
            **claims,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self.ttl),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Check signature and expiry and return the claims.

        Raises:
            Unauthorized: If the token is expired, malformed or wrongly signed
        """
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired session token")
            raise Unauthorized("Oturum süresi doldu")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected invalid session token: {type(e).__name__}")
            raise Unauthorized("Geçersiz token")


_default_tokens = SessionTokens()


def get_session_tokens() -> SessionTokens:
    """FastAPI dependency returning the configured token capability."""
    return _default_tokens
