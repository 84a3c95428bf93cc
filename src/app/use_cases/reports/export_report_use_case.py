"""
Export Report Use Case

Renders the filtered tasks or the team productivity rows as CSV.
"""

import csv
import io
from datetime import datetime
from typing import Callable, Dict, List, Optional

from libs.result import Result, Return
from src.app.services.analytics import (
    ReportFilters,
    ReportTask,
    TeamProductivityData,
    build_team_productivity,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActingUser

from .dtos import ExportDataset, ExportReportResponse
from .snapshot import check_filters, load_filtered_tasks

TASK_COLUMNS = [
    "id",
    "title",
    "project",
    "team",
    "assignee",
    "priority",
    "status",
    "created_at",
    "deadline",
    "completed_at",
]

TEAM_COLUMNS = [
    "id",
    "name",
    "members",
    "completed_tasks",
    "in_progress_tasks",
    "overdue_tasks",
    "avg_tasks_per_member",
]


def _iso(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


def task_rows(tasks: List[ReportTask]) -> List[Dict[str, str]]:
    return [
        {
            "id": str(t.id),
            "title": t.title,
            "project": t.project,
            "team": t.team or "",
            "assignee": t.assignee,
            "priority": t.priority,
            "status": t.status.value,
            "created_at": _iso(t.created_at),
            "deadline": _iso(t.deadline),
            "completed_at": _iso(t.completed_at),
        }
        for t in tasks
    ]


def team_rows(teams: List[TeamProductivityData]) -> List[Dict[str, str]]:
    return [
        {
            "id": t.team_id,
            "name": t.name,
            "members": "; ".join(t.members),
            "completed_tasks": str(t.completed_tasks),
            "in_progress_tasks": str(t.in_progress_tasks),
            "overdue_tasks": str(t.overdue_tasks),
            "avg_tasks_per_member": f"{t.avg_tasks_per_member:g}",
        }
        for t in teams
    ]


def generate_csv(columns: List[str], rows: List[Dict[str, str]]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=columns)
    writer.writeheader()
    writer.writerows(rows)
    return output.getvalue()


class ExportReportUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Callable[[], datetime]] = None):
        self.uow = uow
        self.clock = clock or utcnow

    async def execute(
        self,
        acting_user: ActingUser,
        filters: ReportFilters,
        dataset: ExportDataset = "tasks",
    ) -> Result[ExportReportResponse]:
        filters_error = check_filters(filters)
        if filters_error:
            return Return.err(filters_error)

        async with self.uow:
            snapshot, _, tasks = await load_filtered_tasks(
                self.uow, acting_user, filters, self.clock().date()
            )

        if dataset == "teams":
            content = generate_csv(
                TEAM_COLUMNS,
                team_rows(build_team_productivity(snapshot, tasks, filters.teams)),
            )
        else:
            content = generate_csv(TASK_COLUMNS, task_rows(tasks))

        return Return.ok(
            ExportReportResponse(
                filename=f"planeja-{dataset}-report.csv", content=content
            )
        )
