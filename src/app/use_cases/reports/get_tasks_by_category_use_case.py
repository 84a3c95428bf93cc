"""
Get Tasks By Category Use Case

Drill-down from a report widget into the matching tasks.
"""

from datetime import datetime
from typing import Callable, Optional

from libs.result import Result, Return
from src.app.services.analytics import ReportFilters, tasks_by_category
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser

from .dtos import TasksByCategoryResponse
from .snapshot import check_filters, load_filtered_tasks


class GetTasksByCategoryUseCase:
    """
    Use case for the report drill-down.

    Business Rules:
    - Categories: completed/completedTasks, pending/pendingTasks,
      in-progress, overdue
    - Unknown categories return an empty list
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Callable[[], datetime]] = None):
        self.uow = uow
        self.clock = clock or utcnow

    async def execute(
        self, acting_user: ActingUser, filters: ReportFilters, category: str
    ) -> Result[TasksByCategoryResponse]:
        filters_error = check_filters(filters)
        if filters_error:
            return Return.err(filters_error)

        async with self.uow:
            _, _, tasks = await load_filtered_tasks(
                self.uow, acting_user, filters, self.clock().date()
            )

        return Return.ok(
            TasksByCategoryResponse(
                category=category, tasks=tasks_by_category(tasks, category)
            )
        )
