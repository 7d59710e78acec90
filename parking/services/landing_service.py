"""
Landing Service - host-keyed page resolution.

Flow per request:
1. Resolve the Host header (strip port, platform allow-list)
2. Platform host -> marketing page with recently parked domains
3. Otherwise match the lowercased host exactly, joined with its owner's status
4. Pick one active content entry at random (fresh every request)

Nothing here raises: a failed domain lookup is a not-found page, a failed
content query renders the page without content.
"""
import logging
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parking.core.host import resolve_host
from parking.core.landing import LandingKind, LandingResult, classify_domain
from parking.repositories.domain_repository import DomainRepository
from parking.services.content_service import ContentService

logger = logging.getLogger(__name__)


class LandingService:
    """Resolves an incoming host to the page that should be rendered"""

    def __init__(self, db: AsyncSession, platform_hosts: Iterable[str], featured_limit: int = 8):
        self._db = db
        self._platform_hosts = list(platform_hosts)
        self._featured_limit = featured_limit

    async def resolve(self, raw_host: Optional[str]) -> LandingResult:
        host = resolve_host(raw_host, self._platform_hosts)

        if host is None:
            logger.warning("Landing request without Host header")
            return LandingResult(kind=LandingKind.NOT_FOUND)

        if host.is_platform:
            return LandingResult(
                kind=LandingKind.PLATFORM_HOME,
                host=host.name,
                featured=await self._featured_domains()
            )

        # Stored names are lowercase; only the platform allow-list is case-sensitive
        try:
            domain, owner_status = await DomainRepository(self._db).get_with_owner_status(host.name.lower())
        except SQLAlchemyError as e:
            logger.error(f"Domain lookup failed for host {host.name}: {e}")
            return LandingResult(kind=LandingKind.NOT_FOUND, host=host.name)

        kind = classify_domain(domain, owner_status)
        if kind == LandingKind.NOT_FOUND:
            if domain is None:
                logger.info(f"No parked domain for host {host.name}")
            else:
                logger.info(f"Domain {host.name} hidden: owner status is {owner_status}")
            return LandingResult(kind=kind, host=host.name)

        return LandingResult(
            kind=LandingKind.PARKED,
            host=host.name,
            domain=domain,
            content=await self._random_content()
        )

    async def _random_content(self):
        try:
            return await ContentService.pick_active(self._db)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching daily content: {e}")
            return None

    async def _featured_domains(self):
        try:
            return await DomainRepository(self._db).list_recent_public(self._featured_limit)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching featured domains: {e}")
            return []
