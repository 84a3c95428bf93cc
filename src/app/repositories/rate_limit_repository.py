from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import RateLimitCounter


class RateLimitConflictError(Exception):
    """Another transaction created the counter for the same key first"""


class IRateLimitRepository(ABC):
    """RateLimitCounter repository interface - application layer"""

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[RateLimitCounter]:
        """Get the counter stored under key"""
        pass

    @abstractmethod
    async def save(self, counter: RateLimitCounter) -> RateLimitCounter:
        """Insert or update a counter, raises RateLimitConflictError on a duplicate key"""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every counter, returns the number deleted"""
        pass
