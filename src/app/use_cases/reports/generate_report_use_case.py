"""
Generate Report Use Case

Builds the full analytics report for a set of filters.
"""

from datetime import date, datetime
from typing import Callable, Optional

from libs.result import Result, Return
from src.app.services.analytics import (
    ReportFilters,
    build_kpis,
    build_project_performance,
    build_task_distribution,
    build_team_productivity,
    build_timeline,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser

from .dtos import DateRangeResponse, ReportResponse
from .snapshot import check_filters, load_filtered_tasks


class GenerateReportUseCase:
    """
    Use case for generating the reports page data.

    Business Rules:
    - Covers the projects the user owns or reaches through a team
    - Tasks are filtered by creation date, project, status and assignee
    - The team selection only restricts the team productivity rows
    - Percentages are whole numbers rounded half up; 0 when there are no tasks
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Callable[[], datetime]] = None):
        self.uow = uow
        self.clock = clock or utcnow

    async def execute(
        self, acting_user: ActingUser, filters: ReportFilters
    ) -> Result[ReportResponse]:
        """
        Execute generate report use case.

        Args:
            acting_user: Authenticated user the report is scoped to
            filters: Period, selections, status and granularity

        Returns:
            Result with ReportResponse DTO, or Error (INVALID_PERIOD)
        """
        filters_error = check_filters(filters)
        if filters_error:
            return Return.err(filters_error)

        today: date = self.clock().date()

        async with self.uow:
            snapshot, date_range, tasks = await load_filtered_tasks(
                self.uow, acting_user, filters, today
            )

        return Return.ok(
            ReportResponse(
                filters=filters,
                date_range=DateRangeResponse(
                    start=date_range.start.isoformat(), end=date_range.end.isoformat()
                ),
                kpis=build_kpis(tasks),
                timeline=build_timeline(tasks, date_range),
                project_performance=build_project_performance(snapshot, tasks),
                task_distribution=build_task_distribution(tasks),
                team_productivity=build_team_productivity(
                    snapshot, tasks, filters.teams
                ),
                tasks=tasks,
            )
        )
