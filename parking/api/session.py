"""
Account endpoints: sign-up, session creation and the current profile.

Authentication:
- POST /auth/signup: open, creates a seller profile
- POST /auth/session: validates Basic Auth credentials, returns a JWT
- GET /auth/me: protected by JWT
"""
import base64
import binascii
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from parking.api.auth import create_session_token, verify_session
from parking.api.schemas import EMAIL_PATTERN, ProfileResponse
from parking.db.connection import get_db_session
from parking.db.models import Profile
from parking.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter()


class SignupRequest(BaseModel):
    """Sign-up payload"""
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., description="At least 8 characters")


class SessionResponse(BaseModel):
    token: str
    expires_in: int  # seconds
    profile: ProfileResponse


@router.post("/auth/signup", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db_session)
):
    """
    Create a seller profile (role user, status active).

    Returns 409 if the e-mail is already registered.
    """
    try:
        profile = await ProfileService.create_profile(db, request.email, request.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return profile


def _decode_basic_auth(authorization: Optional[str]) -> tuple[str, str]:
    if not authorization or not authorization.startswith("Basic "):
        logger.warning("Session creation failed: Missing or invalid Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Basic Auth credentials. Provide 'Authorization: Basic <credentials>'.",
            headers={"WWW-Authenticate": "Basic"}
        )

    try:
        decoded = base64.b64decode(authorization[6:].strip(), validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.warning(f"Session creation failed: Invalid Basic Auth encoding - {e}")
        decoded = ""

    if ':' not in decoded:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Basic Auth format. Use base64(email:password).",
            headers={"WWW-Authenticate": "Basic"}
        )

    email, password = decoded.split(':', 1)
    return email, password


@router.post("/auth/session", response_model=SessionResponse)
async def create_session(
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Create a session token (JWT) by validating Basic Auth credentials.

    Disabled profiles can't log in; they get the same 401 as a wrong password.
    """
    email, password = _decode_basic_auth(authorization)

    profile = await ProfileService.validate_credentials(db, email, password)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
            headers={"WWW-Authenticate": "Basic"}
        )

    token, expires_in = create_session_token(profile)
    logger.info(f"Created session for profile {profile.id} (role={profile.role.value})")

    return SessionResponse(
        token=token,
        expires_in=expires_in,
        profile=ProfileResponse.model_validate(profile)
    )


@router.get("/auth/me", response_model=ProfileResponse)
async def get_me(profile: Profile = Depends(verify_session)):
    """Current profile (role drives which dashboard the frontend shows)"""
    return profile
