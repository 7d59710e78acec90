"""
Domain repository for data access.

Read queries used by the landing route and the dashboards. Writes go through
parking.services.domain_service, which also enforces ownership.
"""

from typing import List, Optional, Tuple
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from parking.db.models import Domain, Offer, Profile, ProfileStatus


class DomainRepository:
    """Repository for Domain entity"""

    def __init__(self, session: AsyncSession):
        self._db = session

    async def get_by_id(self, domain_id: int) -> Optional[Domain]:
        """Get domain by database ID"""
        result = await self._db.execute(
            select(Domain).where(Domain.id == domain_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Domain]:
        """Get domain by exact host name"""
        result = await self._db.execute(
            select(Domain).where(Domain.name == name)
        )
        return result.scalar_one_or_none()

    async def get_with_owner_status(self, name: str) -> Tuple[Optional[Domain], Optional[ProfileStatus]]:
        """
        Exact host-name lookup joined with the owning profile's status.

        Returns (None, None) when no domain matches.
        """
        result = await self._db.execute(
            select(Domain, Profile.status)
            .join(Profile, Profile.id == Domain.owner_id)
            .where(Domain.name == name)
        )
        row = result.one_or_none()
        if row is None:
            return None, None
        return row[0], row[1]

    async def get_by_id_with_owner(self, domain_id: int) -> Tuple[Optional[Domain], Optional[Profile]]:
        """Get domain and its owner profile in one query"""
        result = await self._db.execute(
            select(Domain, Profile)
            .join(Profile, Profile.id == Domain.owner_id)
            .where(Domain.id == domain_id)
        )
        row = result.one_or_none()
        if row is None:
            return None, None
        return row[0], row[1]

    async def existing_names(self, names: List[str]) -> set:
        """Return the subset of names already present in inventory"""
        if not names:
            return set()
        result = await self._db.execute(
            select(Domain.name).where(Domain.name.in_(names))
        )
        return set(result.scalars().all())

    async def list_for_owner_with_offer_counts(self, owner_id: str) -> List[Tuple[Domain, int]]:
        """Seller dashboard: own domains sorted by name, with offer counts"""
        result = await self._db.execute(
            select(Domain, func.count(Offer.id))
            .outerjoin(Offer, Offer.domain_id == Domain.id)
            .where(Domain.owner_id == owner_id)
            .group_by(Domain.id)
            .order_by(Domain.name.asc())
        )
        return [(domain, count) for domain, count in result.all()]

    async def list_for_owner(self, owner_id: str) -> List[Domain]:
        """All domains of one profile, sorted by name"""
        result = await self._db.execute(
            select(Domain)
            .where(Domain.owner_id == owner_id)
            .order_by(Domain.name.asc())
        )
        return list(result.scalars().all())

    async def list_all_with_owner_email(self) -> List[Tuple[Domain, Optional[str]]]:
        """Admin oversight: every domain, newest first, with owner e-mail"""
        result = await self._db.execute(
            select(Domain, Profile.email)
            .outerjoin(Profile, Profile.id == Domain.owner_id)
            .order_by(Domain.created_at.desc(), Domain.id.desc())
        )
        return [(domain, email) for domain, email in result.all()]

    async def list_recent_public(self, limit: int) -> List[Domain]:
        """Most recently parked domains of active owners (platform showcase)"""
        result = await self._db.execute(
            select(Domain)
            .join(Profile, Profile.id == Domain.owner_id)
            .where(Profile.status == ProfileStatus.ACTIVE)
            .order_by(Domain.created_at.desc(), Domain.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
