"""
Tests for ProfileService
"""
import pytest

from parking.core.errors import EmailAlreadyRegisteredError, ProfileNotFoundError
from parking.db.models import ProfileRole, ProfileStatus
from parking.services.profile_service import ProfileService


def test_hash_and_verify_password():
    password_hash = ProfileService.hash_password("correct horse")

    assert password_hash != "correct horse"
    assert ProfileService.verify_password("correct horse", password_hash)
    assert not ProfileService.verify_password("wrong horse", password_hash)
    assert not ProfileService.verify_password("", password_hash)
    assert not ProfileService.verify_password("correct horse", "not-a-bcrypt-hash")


def test_hash_empty_password_rejected():
    with pytest.raises(ValueError):
        ProfileService.hash_password("")


@pytest.mark.asyncio
async def test_create_profile_defaults(db):
    profile = await ProfileService.create_profile(db, " Person@Example.com ", "password123")

    assert profile.email == "person@example.com"
    assert profile.role == ProfileRole.USER
    assert profile.status == ProfileStatus.ACTIVE
    assert len(profile.id) == 36


@pytest.mark.asyncio
async def test_create_profile_duplicate(db):
    await ProfileService.create_profile(db, "dup@example.com", "password123")

    with pytest.raises(EmailAlreadyRegisteredError):
        await ProfileService.create_profile(db, "DUP@example.com", "password456")


@pytest.mark.asyncio
async def test_validate_credentials(db):
    await ProfileService.create_profile(db, "login@example.com", "password123")

    assert await ProfileService.validate_credentials(db, "LOGIN@example.com", "password123")
    assert await ProfileService.validate_credentials(db, "login@example.com", "nope") is None
    assert await ProfileService.validate_credentials(db, "ghost@example.com", "password123") is None


@pytest.mark.asyncio
async def test_update_password(db):
    profile = await ProfileService.create_profile(db, "change@example.com", "password123")

    await ProfileService.update_password(db, profile.id, "newpassword1")

    assert await ProfileService.validate_credentials(db, "change@example.com", "newpassword1")
    with pytest.raises(ValueError):
        await ProfileService.update_password(db, profile.id, "short")


@pytest.mark.asyncio
async def test_require_unknown_profile(db):
    with pytest.raises(ProfileNotFoundError):
        await ProfileService.require(db, "missing")

