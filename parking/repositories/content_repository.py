"""
Daily content repository.

The landing route reads every active row on each request; there is no cache.
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parking.db.models import DailyContent


class ContentRepository:
    """Repository for DailyContent entity"""

    def __init__(self, session: AsyncSession):
        self._db = session

    async def get_by_id(self, content_id: int) -> Optional[DailyContent]:
        result = await self._db.execute(
            select(DailyContent).where(DailyContent.id == content_id)
        )
        return result.scalar_one_or_none()

    async def list_active(self) -> List[DailyContent]:
        """All rows flagged active, in insertion order"""
        result = await self._db.execute(
            select(DailyContent)
            .where(DailyContent.is_active == True)  # noqa: E712
            .order_by(DailyContent.id)
        )
        return list(result.scalars().all())

    async def list_all(self) -> List[DailyContent]:
        result = await self._db.execute(
            select(DailyContent).order_by(DailyContent.id)
        )
        return list(result.scalars().all())
