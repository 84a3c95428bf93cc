"""
RateLimitCounter Entity

Sliding-window counter for invitation sends, one row per sender.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class RateLimitCounter(SQLModel, table=True):
    """
    RateLimitCounter entity - attempts made in the current window.

    Business Rules:
    - count resets once the window has elapsed since window_start
    - while blocked_until is in the future every attempt is rejected
    """

    __tablename__ = "rate_limit_counters"

    key: str = Field(primary_key=True, max_length=100)
    count: int = Field(default=0)
    window_start: datetime = Field(sa_column=Column(DateTime, nullable=False))
    blocked_until: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
