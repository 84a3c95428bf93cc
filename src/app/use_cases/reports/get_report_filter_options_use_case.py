"""
Get Report Filter Options Use Case
"""

from libs.result import Result, Return
from src.app.services.analytics import build_filter_options
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

from .dtos import FilterOptions
from .snapshot import load_snapshot


class GetReportFilterOptionsUseCase:
    """Lists the projects, teams and members the reports page can filter on"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, acting_user: ActingUser) -> Result[FilterOptions]:
        async with self.uow:
            snapshot = await load_snapshot(self.uow, acting_user)

        return Return.ok(build_filter_options(snapshot))
