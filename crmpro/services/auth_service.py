"""Registration, email verification and session handling for CRMPro."""

import logging
import os
import uuid
from datetime import datetime, timedelta
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from crmpro.auth.jwt import SessionTokens
from crmpro.database.store import DocumentStore
from crmpro.errors import ConflictError, InvalidCredentials, InvalidToken, NotFoundError
from crmpro.integrations.email import Notifier, build_verification_email
from crmpro.models.constants import DEFAULT_PLAN, REGISTER_REQUIRED_FIELDS, TRIAL_DAYS
from crmpro.models.user import User, UserProfile, UserSummary
from crmpro.services.validation import require_fields

load_dotenv()

logger = logging.getLogger(__name__)

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

VERIFICATION_EMAIL_SUBJECT = "CRMPro - E-posta Adresinizi Doğrulayın"


class LoginResult(BaseModel):
    """Session token plus the public profile of the logged-in user."""
    token: str
    user: UserProfile


class AuthService:
    """Account operations over a whole-document store.

    Each mutating call is a read, an in-memory change and a full rewrite of
    the document. Nothing serializes concurrent calls.
    """

    def __init__(self, store: DocumentStore, notifier: Notifier, tokens: SessionTokens):
        self.store = store
        self.notifier = notifier
        self.tokens = tokens

    def register(
        self,
        name: Optional[str],
        email: Optional[str],
        company: Optional[str],
        phone: Optional[str] = None,
        plan: Optional[str] = None,
    ) -> UserSummary:
        """Create a user, persist it and send the verification email.

        New accounts are created already verified, with no stored verification
        token and no password. The token in the emailed link is generated here
        and is not saved on the user.

        Raises:
            ValidationError: If name, email or company is missing
            ConflictError: If the email is already registered
        """
        require_fields(
            {"name": name, "email": email, "company": company},
            REGISTER_REQUIRED_FIELDS,
            "Ad, e-posta ve şirket alanları zorunludur",
        )

        doc = self.store.read()
        if doc.find_user_by_email(email):
            raise ConflictError("Bu e-posta adresi zaten kayıtlı")

        now = datetime.utcnow()
        user = User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            company=company,
            phone=phone,
            plan=plan or DEFAULT_PLAN,
            verified=True,
            verification_token=None,
            created_at=now,
            trial_ends_at=now + timedelta(days=TRIAL_DAYS),
        )
        doc.users.append(user)
        self.store.write(doc)
        logger.info(f"Registered user {user.id}: {user.email} (plan={user.plan})")

        emailed_token = str(uuid.uuid4())
        link = f"{FRONTEND_URL}/verify/{emailed_token}"
        self.notifier.notify(email, VERIFICATION_EMAIL_SUBJECT, build_verification_email(name, link))

        return UserSummary.from_user(user)

    def verify_email(self, token: str) -> str:
        """Mark the user holding ``token`` as verified.

        Returns:
            Message describing the outcome (already verified or newly verified)

        Raises:
            InvalidToken: If no user holds the token
        """
        doc = self.store.read()
        user = doc.find_user_by_verification_token(token)
        if not user:
            raise InvalidToken("Geçersiz doğrulama bağlantısı")

        if user.verified:
            return "E-posta adresiniz zaten doğrulanmış"

        user.verified = True
        user.verified_at = datetime.utcnow()
        user.verification_token = None
        self.store.write(doc)
        logger.info(f"Verified email for user {user.id}: {user.email}")
        return "E-posta adresiniz başarıyla doğrulandı"

    def login(self, email: Optional[str], password: Optional[str]) -> LoginResult:
        """Check credentials and issue a 7-day session token.

        The password is compared as plaintext against the stored field.
        Verification status is not checked.

        Raises:
            NotFoundError: If no user has the email
            InvalidCredentials: If the password does not match
        """
        doc = self.store.read()
        user = doc.find_user_by_email(email) if email else None
        if not user:
            raise NotFoundError("Kullanıcı bulunamadı")

        if password is None or user.password != password:
            logger.warning(f"Failed login for user {user.id}: password mismatch")
            raise InvalidCredentials("Hatalı şifre")

        token = self.tokens.issue({"userId": user.id, "email": user.email})
        logger.info(f"User {user.id} logged in")
        return LoginResult(token=token, user=UserProfile.from_user(user))

    def get_current_user(self, token: str) -> User:
        """Resolve a session token to the full stored user record.

        Raises:
            Unauthorized: If the token fails signature or expiry checks
            NotFoundError: If the token's user no longer exists
        """
        claims = self.tokens.verify(token)
        user = self.store.read().find_user_by_id(claims.get("userId"))
        if not user:
            raise NotFoundError("Kullanıcı bulunamadı")
        return user

    def list_users(self) -> List[User]:
        """Return every stored user record."""
        return self.store.read().users
