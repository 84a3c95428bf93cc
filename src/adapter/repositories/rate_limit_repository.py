from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.rate_limit_repository import (
    IRateLimitRepository,
    RateLimitConflictError,
)
from src.domain.entities import RateLimitCounter


class RateLimitRepository(IRateLimitRepository):
    """RateLimitCounter repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_key(self, key: str) -> Optional[RateLimitCounter]:
        """Get the counter stored under key"""
        stmt = select(RateLimitCounter).where(RateLimitCounter.key == key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, counter: RateLimitCounter) -> RateLimitCounter:
        """Insert or update a counter"""
        self.session.add(counter)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise RateLimitConflictError(counter.key) from e
        await self.session.refresh(counter)
        return counter

    async def delete_all(self) -> int:
        """Delete every counter"""
        result = await self.session.execute(delete(RateLimitCounter))
        return result.rowcount or 0
