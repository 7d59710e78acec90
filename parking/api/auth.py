"""
Authentication dependencies for the dashboard API.

Sessions are JWTs signed with SESSION_SECRET and issued by POST /auth/session.
Every protected request reloads the profile, so a disabled or deleted
profile loses access immediately even with an unexpired token.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import jwt

from parking.config import settings
from parking.db.connection import get_db_session
from parking.db.models import Profile, ProfileRole, ProfileStatus
from parking.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


def create_session_token(profile: Profile) -> tuple[str, int]:
    """
    Create a session JWT for a profile.

    Returns:
        Tuple of (token, expires_in_seconds)
    """
    expires_at = datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expiration_hours)
    payload = {
        "profile_id": profile.id,
        "email": profile.email,
        "role": profile.role.value,
        "exp": expires_at,
        "type": SESSION_TOKEN_TYPE
    }
    token = jwt.encode(payload, settings.session_secret, algorithm=settings.jwt_algorithm)
    return token, settings.jwt_expiration_hours * 3600


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


async def verify_session(
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db_session)
) -> Profile:
    """
    Verify the session JWT from the Authorization header and load the profile.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired,
            or the profile no longer exists; 403 if the profile is disabled
    """
    if not authorization or not authorization.startswith("Bearer "):
        logger.warning("Session rejected: Missing or invalid Authorization header")
        raise _unauthorized("Missing session token. Please login again.")

    token = authorization[7:].strip()  # Remove "Bearer " prefix
    if not token:
        logger.warning("Session rejected: Empty token")
        raise _unauthorized("Empty session token. Please login again.")

    try:
        payload = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Session rejected: Token expired")
        raise _unauthorized("Session expired. Please login again.")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Session rejected: Invalid token - {type(e).__name__}")
        raise _unauthorized("Invalid session token. Please login again.")

    if payload.get("type") != SESSION_TOKEN_TYPE:
        logger.warning(f"Session rejected: Invalid token type '{payload.get('type')}'")
        raise _unauthorized("Invalid token type. Please login again.")

    profile_id = payload.get("profile_id")
    if not profile_id:
        logger.warning("Session rejected: Missing profile_id in token")
        raise _unauthorized("Invalid token structure. Please login again.")

    profile = await ProfileService.get_by_id(db, profile_id)
    if not profile:
        logger.warning(f"Session rejected: Profile {profile_id} no longer exists")
        raise _unauthorized("Profile not found. Please login again.")

    if profile.status != ProfileStatus.ACTIVE:
        logger.warning(f"Session rejected: Profile {profile_id} is disabled")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This account has been disabled."
        )

    return profile


async def require_admin(profile: Profile = Depends(verify_session)) -> Profile:
    """Allow only admin profiles through"""
    if profile.role != ProfileRole.ADMIN:
        logger.warning(f"Admin access denied for profile {profile.id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return profile
