"""
Admin API - user management, domain oversight, content seeding and inquiries.

Every endpoint requires a session for a profile with role admin.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from parking.api.auth import require_admin
from parking.api.schemas import (
    ContentResponse,
    DomainResponse,
    InquiryResponse,
    ProfileResponse,
)
from parking.db.connection import get_db_session
from parking.db.models import ContentType, Profile, ProfileRole, ProfileStatus
from parking.repositories.content_repository import ContentRepository
from parking.repositories.domain_repository import DomainRepository
from parking.services.content_service import ContentService
from parking.services.domain_service import DomainService
from parking.services.inquiry_service import InquiryService
from parking.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


# ============================================
# Pydantic Models
# ============================================

class AdminProfileResponse(ProfileResponse):
    domain_count: int = 0


class UpdateProfileRequest(BaseModel):
    status: Optional[ProfileStatus] = None
    role: Optional[ProfileRole] = None


class AdminDomainResponse(DomainResponse):
    owner_email: Optional[str] = None


class CreateContentRequest(BaseModel):
    content_type: ContentType
    body: str = Field(..., min_length=1)
    reference: Optional[str] = Field(None, max_length=255)
    target_url: Optional[str] = Field(None, max_length=500)
    is_active: bool = True


class UpdateContentRequest(BaseModel):
    body: Optional[str] = Field(None, min_length=1)
    reference: Optional[str] = Field(None, max_length=255)
    target_url: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None


# ============================================
# Users
# ============================================

@router.get("/users", response_model=List[AdminProfileResponse])
async def list_users(
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """All profiles, newest first, with the number of domains each owns"""
    rows = await ProfileService.list_with_domain_counts(db)
    return [
        AdminProfileResponse(
            **ProfileResponse.model_validate(profile).model_dump(),
            domain_count=count
        )
        for profile, count in rows
    ]


@router.patch("/users/{profile_id}", response_model=ProfileResponse)
async def update_user(
    profile_id: str,
    request: UpdateProfileRequest,
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Change a profile's status or role.

    Disabling a seller takes all of their landing pages offline immediately.
    """
    if profile_id == admin.id and (
        request.status == ProfileStatus.DISABLED or request.role == ProfileRole.USER
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot disable or demote your own profile"
        )

    profile = await ProfileService.update_profile(
        db, profile_id, status=request.status, role=request.role
    )
    logger.info(f"Admin {admin.id} updated profile {profile_id}")
    return profile


@router.delete("/users/{profile_id}")
async def delete_user(
    profile_id: str,
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """Delete a profile together with its domains and their offers"""
    if profile_id == admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot delete your own profile"
        )

    await ProfileService.delete_profile(db, profile_id)
    logger.info(f"Admin {admin.id} deleted profile {profile_id}")
    return {"deleted": True, "id": profile_id}


@router.get("/users/{profile_id}/domains", response_model=List[DomainResponse])
async def list_user_domains(
    profile_id: str,
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """Domains owned by one profile, sorted by name"""
    await ProfileService.require(db, profile_id)
    return await DomainRepository(db).list_for_owner(profile_id)


# ============================================
# Domains
# ============================================

@router.get("/domains", response_model=List[AdminDomainResponse])
async def list_all_domains(
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """Every domain on the platform, newest first, with the owner's e-mail"""
    rows = await DomainRepository(db).list_all_with_owner_email()
    return [
        AdminDomainResponse(
            **DomainResponse.model_validate(domain).model_dump(),
            owner_email=email
        )
        for domain, email in rows
    ]


@router.delete("/domains/{domain_id}")
async def delete_any_domain(
    domain_id: int,
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    domain = await DomainService.delete_domain(db, domain_id, admin)
    return {"deleted": True, "id": domain.id, "name": domain.name}


# ============================================
# Content
# ============================================

@router.get("/content", response_model=List[ContentResponse])
async def list_content(
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    return await ContentRepository(db).list_all()


@router.post("/content", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    request: CreateContentRequest,
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """Add a verse, quote or banner to the rotation"""
    try:
        return await ContentService.create_content(
            db,
            content_type=request.content_type,
            body=request.body,
            reference=request.reference,
            target_url=request.target_url,
            is_active=request.is_active
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/content/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: int,
    request: UpdateContentRequest,
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    """Edit or toggle a content entry"""
    changes = request.model_dump(exclude_unset=True)
    if changes.get("is_active", True) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="is_active cannot be null"
        )
    try:
        return await ContentService.update_content(db, content_id, **changes)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ============================================
# Inquiries
# ============================================

@router.get("/inquiries", response_model=List[InquiryResponse])
async def list_inquiries(
    admin: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session)
):
    return await InquiryService.list_inquiries(db)
