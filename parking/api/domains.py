"""
Seller dashboard API - domain inventory and received offers.

All endpoints require a session; non-admins only ever see their own rows.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from parking.api.auth import verify_session
from parking.api.schemas import DomainResponse, OfferResponse
from parking.db.connection import get_db_session
from parking.db.models import Profile
from parking.repositories.domain_repository import DomainRepository
from parking.services.domain_service import DomainService
from parking.services.offer_service import OfferService

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================
# Pydantic Models
# ============================================

class CreateDomainRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=253, description="Host name, e.g. example.com")
    list_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    is_for_sale: bool = True
    landing_page_type: Optional[str] = Field(None, max_length=50)


class UpdateDomainRequest(BaseModel):
    """Partial update - omitted fields are left unchanged, list_price may be null"""
    list_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    is_for_sale: Optional[bool] = None
    landing_page_type: Optional[str] = Field(None, min_length=1, max_length=50)


class DomainWithOffersResponse(DomainResponse):
    offer_count: int = 0


class ImportResponse(BaseModel):
    added: List[str]
    already_exists: List[str]
    skipped_lines: int


class DeletedResponse(BaseModel):
    deleted: bool = True
    id: int
    name: str


# ============================================
# Endpoints
# ============================================

@router.get("/domains", response_model=List[DomainWithOffersResponse])
async def list_my_domains(
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session)
):
    """Own domains sorted by name, each with its number of offers"""
    rows = await DomainRepository(db).list_for_owner_with_offer_counts(profile.id)
    return [
        DomainWithOffersResponse(
            **DomainResponse.model_validate(domain).model_dump(),
            offer_count=count
        )
        for domain, count in rows
    ]


@router.post("/domains", response_model=DomainResponse, status_code=status.HTTP_201_CREATED)
async def create_domain(
    request: CreateDomainRequest,
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session)
):
    """Add one domain to the caller's inventory"""
    kwargs = {}
    if request.landing_page_type:
        kwargs["landing_page_type"] = request.landing_page_type

    return await DomainService.add_domain(
        db,
        owner=profile,
        name=request.name,
        list_price=request.list_price,
        is_for_sale=request.is_for_sale,
        **kwargs
    )


@router.post("/domains/import", response_model=ImportResponse)
async def import_domains(
    request: Request,
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Bulk-add domains from a CSV text body ("name, price" per line).

    Example:
        curl -X POST /api/v1/domains/import -H "Content-Type: text/csv" \\
             --data-binary @domains.csv
    """
    raw = await request.body()
    try:
        csv_text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="CSV body must be UTF-8 text"
        )

    result = await DomainService.import_csv(db, profile, csv_text)
    return ImportResponse(
        added=result.added,
        already_exists=result.already_exists,
        skipped_lines=result.skipped_lines
    )


@router.patch("/domains/{domain_id}", response_model=DomainResponse)
async def update_domain(
    domain_id: int,
    request: UpdateDomainRequest,
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session)
):
    """Change price, for-sale flag or landing page type (owner or admin)"""
    changes = request.model_dump(exclude_unset=True)
    if changes.get("is_for_sale", True) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="is_for_sale cannot be null"
        )
    return await DomainService.update_domain(db, domain_id, profile, **changes)


@router.delete("/domains/{domain_id}", response_model=DeletedResponse)
async def delete_domain(
    domain_id: int,
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session)
):
    """Delete a domain and its offers (owner or admin)"""
    domain = await DomainService.delete_domain(db, domain_id, profile)
    return DeletedResponse(id=domain.id, name=domain.name)


@router.get("/domains/{domain_id}/offers", response_model=List[OfferResponse])
async def list_domain_offers(
    domain_id: int,
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session)
):
    """Offers received for one domain, newest first (owner or admin)"""
    return await OfferService.list_for_domain(db, domain_id, profile)
