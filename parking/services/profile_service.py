"""
Profile Service - sign-up, credential checks and admin user management.

Passwords are stored as bcrypt hashes. A profile's status gates both
dashboard login and whether its domains are served by the landing route.
"""
from typing import List, Optional, Tuple
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
import bcrypt
import logging
import uuid

from parking.core.errors import EmailAlreadyRegisteredError, ProfileNotFoundError
from parking.db.models import Domain, Offer, Profile, ProfileRole, ProfileStatus

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class ProfileService:
    """Service for managing profiles and authentication"""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            bcrypt hash as string
        """
        if not password:
            raise ValueError("Cannot hash empty password")
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        """
        Verify a password against a stored hash.

        Returns False for empty input or a malformed hash.
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
        except ValueError as e:
            logger.error(f"Error verifying password: {e}")
            return False

    @staticmethod
    def normalize_email(email: str) -> str:
        return (email or "").strip().lower()

    @staticmethod
    async def create_profile(
        db: AsyncSession,
        email: str,
        password: str,
        role: ProfileRole = ProfileRole.USER
    ) -> Profile:
        """
        Create a new profile (sign-up).

        Args:
            db: Database session
            email: Login e-mail (stored lowercase)
            password: Plain text password (will be hashed)
            role: user by default; admin only via CLI or an admin

        Returns:
            Profile model

        Raises:
            EmailAlreadyRegisteredError: If the e-mail already has a profile
            ValueError: If the password is too short
        """
        email = ProfileService.normalize_email(email)

        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        existing = await ProfileService.get_by_email(db, email)
        if existing:
            raise EmailAlreadyRegisteredError(email)

        now = datetime.now(timezone.utc)
        profile = Profile(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=ProfileService.hash_password(password),
            role=role,
            status=ProfileStatus.ACTIVE,
            created_at=now,
            updated_at=now
        )

        db.add(profile)
        await db.commit()
        await db.refresh(profile)

        logger.info(f"Created profile: {profile.id} (role: {role.value})")
        return profile

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[Profile]:
        """Get profile by e-mail, None if not found"""
        result = await db.execute(
            select(Profile).where(Profile.email == ProfileService.normalize_email(email))
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_id(db: AsyncSession, profile_id: str) -> Optional[Profile]:
        """Get profile by ID, None if not found"""
        result = await db.execute(
            select(Profile).where(Profile.id == profile_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def require(db: AsyncSession, profile_id: str) -> Profile:
        """Get profile by ID or raise ProfileNotFoundError"""
        profile = await ProfileService.get_by_id(db, profile_id)
        if not profile:
            raise ProfileNotFoundError(profile_id)
        return profile

    @staticmethod
    async def validate_credentials(
        db: AsyncSession,
        email: str,
        password: str
    ) -> Optional[Profile]:
        """
        Validate e-mail and password credentials.

        Returns:
            Profile if credentials are valid and the profile is active, None otherwise
        """
        profile = await ProfileService.get_by_email(db, email)

        if not profile:
            logger.warning("Login attempt failed: unknown e-mail")
            return None

        if profile.status != ProfileStatus.ACTIVE:
            logger.warning(f"Login attempt failed: profile {profile.id} is disabled")
            return None

        if not ProfileService.verify_password(password, profile.password_hash):
            logger.warning(f"Login attempt failed: invalid password for profile {profile.id}")
            return None

        logger.info(f"Profile authenticated successfully: {profile.id}")
        return profile

    @staticmethod
    async def update_password(db: AsyncSession, profile_id: str, new_password: str) -> Profile:
        """
        Update profile password.

        Raises:
            ProfileNotFoundError: If the profile doesn't exist
            ValueError: If the password is too short
        """
        if len(new_password or "") < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        profile = await ProfileService.require(db, profile_id)
        profile.password_hash = ProfileService.hash_password(new_password)
        profile.updated_at = datetime.now(timezone.utc)

        await db.commit()

        logger.info(f"Password updated for profile: {profile.id}")
        return profile

    @staticmethod
    async def update_profile(
        db: AsyncSession,
        profile_id: str,
        status: Optional[ProfileStatus] = None,
        role: Optional[ProfileRole] = None
    ) -> Profile:
        """
        Change a profile's status and/or role (admin action).

        Disabling a profile takes its domains offline on the next request.

        Raises:
            ProfileNotFoundError: If the profile doesn't exist
        """
        profile = await ProfileService.require(db, profile_id)

        if status is not None:
            profile.status = status
        if role is not None:
            profile.role = role
        profile.updated_at = datetime.now(timezone.utc)

        await db.commit()
        await db.refresh(profile)

        logger.info(
            f"Updated profile {profile.id}: status={profile.status.value}, role={profile.role.value}"
        )
        return profile

    @staticmethod
    async def delete_profile(db: AsyncSession, profile_id: str) -> None:
        """
        Delete a profile together with its domains and their offers.

        Raises:
            ProfileNotFoundError: If the profile doesn't exist
        """
        await ProfileService.require(db, profile_id)

        owned_domain_ids = select(Domain.id).where(Domain.owner_id == profile_id)
        await db.execute(delete(Offer).where(Offer.domain_id.in_(owned_domain_ids)))
        await db.execute(delete(Domain).where(Domain.owner_id == profile_id))
        await db.execute(delete(Profile).where(Profile.id == profile_id))
        await db.commit()

        logger.info(f"Deleted profile {profile_id} and all owned domains")

    @staticmethod
    async def list_with_domain_counts(db: AsyncSession) -> List[Tuple[Profile, int]]:
        """Admin user list: newest first, with number of domains owned"""
        result = await db.execute(
            select(Profile, func.count(Domain.id))
            .outerjoin(Domain, Domain.owner_id == Profile.id)
            .group_by(Profile.id)
            .order_by(Profile.created_at.desc())
        )
        return [(profile, count) for profile, count in result.all()]
