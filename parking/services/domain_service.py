"""
Domain Service - seller inventory management.

Every write goes through an ownership check: sellers touch only their own
rows, admins touch any row.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from parking.core.errors import DomainAlreadyExistsError, DomainNotFoundError, PermissionDeniedError
from parking.core.host import normalize_domain_name
from parking.db.models import DEFAULT_LANDING_PAGE_TYPE, Domain, Offer, Profile, ProfileRole
from parking.repositories.domain_repository import DomainRepository
from parking.services.csv_import import parse_domain_csv

logger = logging.getLogger(__name__)

# Sentinel for "field not supplied" in partial updates (None is a valid price)
UNSET = object()


@dataclass
class ImportResult:
    """Outcome of a CSV upload"""
    added: List[str] = field(default_factory=list)
    already_exists: List[str] = field(default_factory=list)
    skipped_lines: int = 0


def can_manage(actor: Profile, domain: Domain) -> bool:
    return actor.role == ProfileRole.ADMIN or domain.owner_id == actor.id


class DomainService:
    """Service for creating, updating and deleting parked domains"""

    @staticmethod
    async def get_for_actor(db: AsyncSession, domain_id: int, actor: Profile) -> Domain:
        """
        Load a domain the actor may manage.

        Raises:
            DomainNotFoundError: If no such domain exists
            PermissionDeniedError: If the actor is neither owner nor admin
        """
        domain = await DomainRepository(db).get_by_id(domain_id)
        if not domain:
            raise DomainNotFoundError(domain_id)
        if not can_manage(actor, domain):
            logger.warning(f"Profile {actor.id} attempted to access domain {domain_id} without permission")
            raise PermissionDeniedError("You don't have access to this domain")
        return domain

    @staticmethod
    async def add_domain(
        db: AsyncSession,
        owner: Profile,
        name: str,
        list_price: Optional[Decimal] = None,
        is_for_sale: bool = True,
        landing_page_type: str = DEFAULT_LANDING_PAGE_TYPE
    ) -> Domain:
        """
        Add a domain to the owner's inventory.

        Raises:
            InvalidDomainNameError: If the name can't be served as a host
            DomainAlreadyExistsError: If any profile already registered the name
        """
        name = normalize_domain_name(name)

        if await DomainRepository(db).get_by_name(name):
            raise DomainAlreadyExistsError(name)

        domain = Domain(
            name=name,
            list_price=list_price,
            is_for_sale=is_for_sale,
            landing_page_type=landing_page_type or DEFAULT_LANDING_PAGE_TYPE,
            owner_id=owner.id,
            created_at=datetime.now(timezone.utc)
        )
        db.add(domain)

        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise DomainAlreadyExistsError(name) from e

        await db.refresh(domain)
        logger.info(f"✅ Domain added: {domain.name} (id={domain.id}, owner={owner.id})")
        return domain

    @staticmethod
    async def import_csv(db: AsyncSession, owner: Profile, csv_text: str) -> ImportResult:
        """
        Bulk-add domains from CSV text.

        Rows are for sale with the default landing page. Names already in
        inventory are reported and skipped; the rest are added.
        """
        parsed = parse_domain_csv(csv_text)
        result = ImportResult(skipped_lines=parsed.skipped_lines)

        if not parsed.rows:
            return result

        existing = await DomainRepository(db).existing_names([row.name for row in parsed.rows])
        now = datetime.now(timezone.utc)

        for row in parsed.rows:
            if row.name in existing:
                result.already_exists.append(row.name)
                continue
            db.add(Domain(
                name=row.name,
                list_price=row.list_price,
                is_for_sale=True,
                landing_page_type=DEFAULT_LANDING_PAGE_TYPE,
                owner_id=owner.id,
                created_at=now
            ))
            result.added.append(row.name)

        await db.commit()

        logger.info(
            f"CSV import for profile {owner.id}: added={len(result.added)}, "
            f"existing={len(result.already_exists)}, skipped_lines={result.skipped_lines}"
        )
        return result

    @staticmethod
    async def update_domain(
        db: AsyncSession,
        domain_id: int,
        actor: Profile,
        list_price=UNSET,
        is_for_sale=UNSET,
        landing_page_type=UNSET
    ) -> Domain:
        """
        Partially update a domain. Only supplied fields change; the name is fixed.

        Raises:
            DomainNotFoundError, PermissionDeniedError
        """
        domain = await DomainService.get_for_actor(db, domain_id, actor)

        if list_price is not UNSET:
            domain.list_price = list_price
        if is_for_sale is not UNSET:
            domain.is_for_sale = bool(is_for_sale)
        if landing_page_type is not UNSET and landing_page_type:
            domain.landing_page_type = landing_page_type

        await db.commit()
        await db.refresh(domain)

        logger.info(f"Updated domain {domain.name} (id={domain.id}) by profile {actor.id}")
        return domain

    @staticmethod
    async def delete_domain(db: AsyncSession, domain_id: int, actor: Profile) -> Domain:
        """
        Delete a domain and its offers.

        Raises:
            DomainNotFoundError, PermissionDeniedError
        """
        domain = await DomainService.get_for_actor(db, domain_id, actor)

        await db.execute(delete(Offer).where(Offer.domain_id == domain.id))
        await db.execute(delete(Domain).where(Domain.id == domain.id))
        await db.commit()

        logger.info(f"Deleted domain {domain.name} (id={domain.id}) by profile {actor.id}")
        return domain
