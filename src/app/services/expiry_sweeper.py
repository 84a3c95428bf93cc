"""
Background invitation expiry sweep.

Runs ExpireInvitationsUseCase once on start and then every interval, each
tick in its own unit of work. Started and cancelled from the FastAPI lifespan.
"""

import asyncio
import logging
from typing import AsyncContextManager, Callable, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import ExpireInvitationsUseCase

logger = logging.getLogger(__name__)


class InvitationExpirySweeper:
    def __init__(
        self,
        uow_factory: Callable[[], AsyncContextManager[UnitOfWork]],
        interval_seconds: int = 60,
    ):
        self.uow_factory = uow_factory
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    async def run_once(self) -> int:
        async with self.uow_factory() as uow:
            result = await ExpireInvitationsUseCase(uow).execute()
        if result.is_err():
            logger.error(f"Expiry sweep failed: {result.error.code}")
            return 0
        return result.value.expired

    async def run_forever(self):
        while True:
            try:
                expired = await self.run_once()
                if expired > 0:
                    logger.info(f"Expiry sweep: {expired} invitation(s) expired")
            except Exception as e:
                logger.error(f"Expiry sweep error: {e}")

            await asyncio.sleep(self.interval_seconds)

    def start(self):
        if self._task is None:
            self._task = asyncio.create_task(self.run_forever())

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
