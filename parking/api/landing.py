"""
Host-keyed landing route.

Every GET that no other route claims lands here. The page depends only on
the Host header: platform hosts get the marketing page, parked domains of
active owners get their landing page, everything else gets a 404 page.
This route never raises.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from parking.config import settings
from parking.core.landing import LandingKind
from parking.db.connection import get_db_session
from parking.rendering.pages import render_domain_page, render_not_found, render_platform_home
from parking.services.landing_service import LandingService

logger = logging.getLogger(__name__)

router = APIRouter()

# Content is picked per request
NO_CACHE_HEADERS = {"Cache-Control": "no-store"}


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
@router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def landing_page(
    request: Request,
    path: str = "",
    db: AsyncSession = Depends(get_db_session)
):
    service = LandingService(db, settings.platform_hosts, settings.featured_domains_limit)
    result = await service.resolve(request.headers.get("host"))

    if result.kind == LandingKind.PLATFORM_HOME:
        html = render_platform_home(settings.platform_name, result.featured)
    elif result.kind == LandingKind.PARKED:
        logger.debug(f"Serving landing page for {result.host}")
        html = render_domain_page(result.domain, result.content, settings.platform_name)
    else:
        html = render_not_found(result.host, settings.platform_name)

    return HTMLResponse(content=html, status_code=result.status_code, headers=NO_CACHE_HEADERS)
