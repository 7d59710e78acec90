"""
Inquiry Service - general questions from the platform contact form.
"""
from datetime import datetime, timezone
from typing import List, Tuple
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parking.db.models import Inquiry
from parking.services.notifier import NotificationStatus, Notifier

logger = logging.getLogger(__name__)


class InquiryService:
    """Service for contact form inquiries"""

    @staticmethod
    async def submit_inquiry(
        db: AsyncSession,
        notifier: Notifier,
        email: str,
        message: str
    ) -> Tuple[Inquiry, NotificationStatus]:
        """
        Store an inquiry with status "New" and alert the admin.

        Raises:
            ValueError: If e-mail or message is empty
        """
        email = (email or "").strip()
        message = (message or "").strip()
        if not email or not message:
            raise ValueError("Email and message are required.")

        inquiry = Inquiry(
            submitter_email=email,
            message=message,
            status="New",
            created_at=datetime.now(timezone.utc)
        )
        db.add(inquiry)
        await db.commit()
        await db.refresh(inquiry)

        logger.info(f"New general inquiry saved: {inquiry.id} ({len(message)} chars)")

        status = await notifier.notify_inquiry(inquiry)
        return inquiry, status

    @staticmethod
    async def list_inquiries(db: AsyncSession) -> List[Inquiry]:
        """All inquiries, newest first"""
        result = await db.execute(
            select(Inquiry).order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
        )
        return list(result.scalars().all())
