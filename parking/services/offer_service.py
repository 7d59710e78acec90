"""
Offer Service - anonymous buyer offers and the owner's view of them.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parking.core.errors import DomainNotFoundError, OfferNotAllowedError
from parking.db.models import Offer, Profile, ProfileStatus
from parking.repositories.domain_repository import DomainRepository
from parking.services.domain_service import DomainService
from parking.services.notifier import NotificationStatus, Notifier

logger = logging.getLogger(__name__)


@dataclass
class OfferSubmission:
    offer: Offer
    domain_name: str
    notification: NotificationStatus


class OfferService:
    """Service for buyer offers"""

    @staticmethod
    async def submit_offer(
        db: AsyncSession,
        notifier: Notifier,
        domain_id: int,
        buyer_email: str,
        offer_amount: Optional[Decimal] = None,
        message: Optional[str] = None
    ) -> OfferSubmission:
        """
        Store an offer, then e-mail the domain owner.

        The offer is committed before the notification is attempted, so a
        failed e-mail never loses the lead.

        Raises:
            DomainNotFoundError: Unknown domain, or the owner is disabled
            OfferNotAllowedError: The domain is parked but not for sale
        """
        domain, owner = await DomainRepository(db).get_by_id_with_owner(domain_id)

        if domain is None or owner is None or owner.status != ProfileStatus.ACTIVE:
            raise DomainNotFoundError(domain_id)
        if not domain.is_for_sale:
            raise OfferNotAllowedError(f"{domain.name} is not accepting offers")

        offer = Offer(
            domain_id=domain.id,
            buyer_email=buyer_email.strip(),
            offer_amount=offer_amount,
            message=(message or "").strip(),
            created_at=datetime.now(timezone.utc)
        )
        db.add(offer)
        await db.commit()
        await db.refresh(offer)

        logger.info(f"💰 Offer {offer.id} received for domain {domain.name}")

        status = await notifier.notify_offer(offer, domain, owner.email)
        return OfferSubmission(offer=offer, domain_name=domain.name, notification=status)

    @staticmethod
    async def list_for_domain(db: AsyncSession, domain_id: int, actor: Profile) -> List[Offer]:
        """
        Offers for one domain, newest first. Owner or admin only.

        Raises:
            DomainNotFoundError, PermissionDeniedError
        """
        await DomainService.get_for_actor(db, domain_id, actor)

        result = await db.execute(
            select(Offer)
            .where(Offer.domain_id == domain_id)
            .order_by(Offer.created_at.desc(), Offer.id.desc())
        )
        return list(result.scalars().all())
