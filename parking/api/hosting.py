"""
Hosting API - attach an inventory domain to the Vercel project.
"""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from parking.api.auth import verify_session
from parking.api.deps import get_vercel_client
from parking.clients.vercel_client import VercelClient
from parking.core.errors import DomainNotFoundError, PermissionDeniedError
from parking.core.host import normalize_domain_name
from parking.db.connection import get_db_session
from parking.db.models import Profile
from parking.repositories.domain_repository import DomainRepository
from parking.services.domain_service import can_manage

logger = logging.getLogger(__name__)

router = APIRouter()


class AddHostingDomainRequest(BaseModel):
    domain: str = Field(..., min_length=1, max_length=253)


class AddHostingDomainResponse(BaseModel):
    domain: str
    hosting: dict


@router.post("/hosting/domains", response_model=AddHostingDomainResponse)
async def add_hosting_domain(
    request: AddHostingDomainRequest,
    profile: Profile = Depends(verify_session),
    db: AsyncSession = Depends(get_db_session),
    vercel: VercelClient = Depends(get_vercel_client)
):
    """
    Register a domain with the hosting provider so its traffic reaches us.

    The domain must already be in inventory and managed by the caller.
    Provider rejections come back with the provider's status code.
    """
    name = normalize_domain_name(request.domain)

    domain = await DomainRepository(db).get_by_name(name)
    if not domain:
        raise DomainNotFoundError(name)
    if not can_manage(profile, domain):
        logger.warning(f"Profile {profile.id} tried to host domain {name} it doesn't own")
        raise PermissionDeniedError("You don't have access to this domain")

    data = await vercel.add_domain(name)
    return AddHostingDomainResponse(domain=name, hosting=data)
