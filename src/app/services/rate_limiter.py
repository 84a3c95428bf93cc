"""
Invitation send rate limiter.

Sliding window with a cooldown: at most ``max_attempts`` sends per
``window_seconds``; reaching the limit blocks the key for ``block_seconds``.
Counter state lives in the rate_limit_counters table and is read and written
through the caller's unit of work, so it commits with the caller's
transaction.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Callable, Optional

from pydantic import BaseModel

from src.app.repositories.rate_limit_repository import RateLimitConflictError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import RateLimitCounter

logger = logging.getLogger(__name__)


class RateLimitDecision(BaseModel):
    """Outcome of one check_and_consume call"""

    allowed: bool
    retry_after_seconds: int = 0


class RateLimiter:
    def __init__(
        self,
        uow: UnitOfWork,
        max_attempts: int = 5,
        window_seconds: int = 60,
        block_seconds: int = 30,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.uow = uow
        self.max_attempts = max_attempts
        self.window = timedelta(seconds=window_seconds)
        self.block = timedelta(seconds=block_seconds)
        self.clock = clock or utcnow

    async def check_and_consume(self, key: str) -> RateLimitDecision:
        """
        Consume one attempt for key.

        Must be called inside an open unit of work, before the caller has
        written anything else; the caller commits. When a concurrent request
        creates the counter first, the unit of work is rolled back and the
        attempt is counted against the stored counter instead.

        Returns:
            RateLimitDecision with allowed=False and the seconds left to wait
            when the key is blocked or has just hit the limit
        """
        try:
            return await self._consume(key)
        except RateLimitConflictError:
            await self.uow.rollback()
            return await self._consume(key)

    async def _consume(self, key: str) -> RateLimitDecision:
        now = self.clock()
        counter = await self.uow.rate_limits.get_by_key(key)
        if counter is None:
            counter = RateLimitCounter(key=key, count=0, window_start=now)

        if counter.blocked_until is not None:
            if now < counter.blocked_until:
                remaining = (counter.blocked_until - now).total_seconds()
                return RateLimitDecision(
                    allowed=False, retry_after_seconds=math.ceil(remaining)
                )
            # Cooldown served, start over
            counter.count = 0
            counter.window_start = now
            counter.blocked_until = None

        if now - counter.window_start > self.window:
            counter.count = 0
            counter.window_start = now

        if counter.count >= self.max_attempts:
            counter.blocked_until = now + self.block
            await self.uow.rate_limits.save(counter)
            logger.warning(f"Rate limit reached for {key}, blocked until {counter.blocked_until}")
            return RateLimitDecision(
                allowed=False,
                retry_after_seconds=math.ceil(self.block.total_seconds()),
            )

        counter.count += 1
        await self.uow.rate_limits.save(counter)
        return RateLimitDecision(allowed=True)
