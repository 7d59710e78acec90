"""
Content Service - admin seeding of rotating landing page content.
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from parking.core.errors import ContentNotFoundError
from parking.core.landing import pick_random
from parking.db.models import ContentType, DailyContent
from parking.repositories.content_repository import ContentRepository

logger = logging.getLogger(__name__)

UNSET = object()


class ContentService:
    """Service for daily content rows"""

    @staticmethod
    async def create_content(
        db: AsyncSession,
        content_type: ContentType,
        body: str,
        reference: Optional[str] = None,
        target_url: Optional[str] = None,
        is_active: bool = True
    ) -> DailyContent:
        """
        Add a content entry.

        Raises:
            ValueError: If the body is empty, or a banner has no target_url
        """
        body = (body or "").strip()
        if not body:
            raise ValueError("Content body is required")
        if content_type == ContentType.BANNER and not target_url:
            raise ValueError("Banner content requires a target_url")

        content = DailyContent(
            content_type=content_type,
            body=body,
            reference=reference or None,
            target_url=target_url or None,
            is_active=is_active,
            created_at=datetime.now(timezone.utc)
        )
        db.add(content)
        await db.commit()
        await db.refresh(content)

        logger.info(f"Created {content_type.value} content {content.id}")
        return content

    @staticmethod
    async def update_content(
        db: AsyncSession,
        content_id: int,
        body=UNSET,
        reference=UNSET,
        target_url=UNSET,
        is_active=UNSET
    ) -> DailyContent:
        """
        Partially update a content entry (typically to toggle is_active).

        Raises:
            ContentNotFoundError: If the row doesn't exist
            ValueError: If the body would become empty, or a banner would lose its target_url
        """
        content = await ContentRepository(db).get_by_id(content_id)
        if not content:
            raise ContentNotFoundError(content_id)

        if body is not UNSET:
            body = (body or "").strip()
            if not body:
                raise ValueError("Content body is required")
        if target_url is not UNSET and content.content_type == ContentType.BANNER and not target_url:
            raise ValueError("Banner content requires a target_url")

        if body is not UNSET:
            content.body = body
        if reference is not UNSET:
            content.reference = reference or None
        if target_url is not UNSET:
            content.target_url = target_url or None
        if is_active is not UNSET:
            content.is_active = bool(is_active)

        await db.commit()
        await db.refresh(content)

        logger.info(f"Updated content {content.id} (active={content.is_active})")
        return content

    @staticmethod
    async def pick_active(db: AsyncSession) -> Optional[DailyContent]:
        """Load all active rows and pick one uniformly at random"""
        entries = await ContentRepository(db).list_active()
        return pick_random(entries)
