"""FastAPI web application for CRMPro."""

from datetime import datetime

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from crmpro import __version__
from crmpro.api.auth_models import (
    CurrentUserResponse,
    HealthResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UsersResponse,
)
from crmpro.api.errors import register_exception_handlers
from crmpro.auth.dependencies import get_bearer_token
from crmpro.auth.jwt import SessionTokens, get_session_tokens
from crmpro.database.store import DocumentStore, get_store
from crmpro.errors import NotFoundError
from crmpro.integrations.email import Notifier, get_notifier
from crmpro.models.contact import EnterpriseContactRequest
from crmpro.services.auth_service import AuthService
from crmpro.services.contact_service import record_enterprise_contact


# Initialize FastAPI app
app = FastAPI(
    title="CRMPro API",
    description="Account registration and authentication backend for CRMPro",
    version=__version__,
)

# Open to every origin for this deployment
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)


def get_auth_service(
    store: DocumentStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
    tokens: SessionTokens = Depends(get_session_tokens),
) -> AuthService:
    return AuthService(store, notifier, tokens)


@app.get("/")
async def root():
    """Service banner."""
    return {"name": "CRMPro API", "version": __version__}


@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(message="CRMPro API çalışıyor", timestamp=datetime.utcnow())


@app.post("/api/auth/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    """Register a new account and send the verification email."""
    user = auth.register(
        name=data.name,
        email=data.email,
        company=data.company,
        phone=data.phone,
        plan=data.plan,
    )
    return RegisterResponse(
        message="Kayıt başarılı! Doğrulama e-postası gönderildi.",
        user=user,
    )


@app.get("/api/auth/verify/{token}", response_model=MessageResponse)
async def verify_email(token: str, auth: AuthService = Depends(get_auth_service)):
    """Verify an email address with the token from the verification link."""
    return MessageResponse(message=auth.verify_email(token))


@app.post("/api/auth/login", response_model=LoginResponse)
async def login(data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """Log in with email and password."""
    try:
        result = auth.login(data.email, data.password)
    except NotFoundError as e:
        # Unknown email is a bad request on this route, not a missing resource
        raise e.with_status(status.HTTP_400_BAD_REQUEST)
    return LoginResponse(message="Giriş başarılı", token=result.token, user=result.user)


@app.get("/api/auth/me", response_model=CurrentUserResponse)
async def me(token: str = Depends(get_bearer_token), auth: AuthService = Depends(get_auth_service)):
    """Return the stored record of the user holding the session token."""
    user = auth.get_current_user(token)
    return CurrentUserResponse(user=user.to_record())


@app.get("/api/users", response_model=UsersResponse)
async def list_users(auth: AuthService = Depends(get_auth_service)):
    """List every stored user. Not authenticated."""
    return UsersResponse(users=[user.to_record() for user in auth.list_users()])


@app.post("/api/contact/enterprise", response_model=MessageResponse)
async def enterprise_contact(data: EnterpriseContactRequest):
    """Accept an enterprise contact request. Logged only."""
    record_enterprise_contact(data)
    return MessageResponse(message="Talebiniz alındı. En kısa sürede sizinle iletişime geçeceğiz.")
