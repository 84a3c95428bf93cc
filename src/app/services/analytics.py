"""
Reports analytics.

Pure aggregation functions over a ReportSnapshot. Nothing here touches the
database: the reports use cases load the snapshot through the unit of work
and pass it in, so the same filters over the same snapshot always produce
the same report.
"""

import math
from datetime import date, datetime, time, timedelta
from typing import Annotated, Dict, List, Literal, Optional, Set, Union
from uuid import UUID

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, Field

from src.domain.entities import TaskStatus

UNASSIGNED = "Unassigned"
UNKNOWN_PROJECT = "Unknown project"

DISTRIBUTION_ORDER = (
    TaskStatus.pending,
    TaskStatus.in_progress,
    TaskStatus.completed,
    TaskStatus.overdue,
)

# Calendar offsets for the preset periods, counted back from start of today
PERIOD_OFFSETS = {
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "quarter": relativedelta(months=3),
    "year": relativedelta(years=1),
}


# ============================================================================
# Filters
# ============================================================================


class PresetPeriod(BaseModel):
    kind: Literal["day", "week", "month", "quarter", "year"] = "month"


class CustomPeriod(BaseModel):
    kind: Literal["custom"] = "custom"
    start_date: date
    end_date: date


ReportPeriod = Annotated[
    Union[PresetPeriod, CustomPeriod], Field(discriminator="kind")
]


class ReportFilters(BaseModel):
    """Empty id sets mean no restriction"""

    period: ReportPeriod = Field(default_factory=PresetPeriod)
    projects: Set[UUID] = Field(default_factory=set)
    teams: Set[UUID] = Field(default_factory=set)
    members: Set[UUID] = Field(default_factory=set)
    status: Literal["all", "pending", "in-progress", "completed", "overdue"] = "all"
    granularity: Literal["day", "week", "month"] = "day"


class DateRange(BaseModel):
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


# ============================================================================
# Snapshot
# ============================================================================


class ReportTask(BaseModel):
    """Task flattened for reporting; names are resolved when the snapshot is built"""

    id: UUID
    title: str
    description: Optional[str] = None
    project_id: UUID
    project: str = UNKNOWN_PROJECT
    team: Optional[str] = None
    assignee_ids: List[UUID] = Field(default_factory=list)
    assignee: str = UNASSIGNED
    priority: str
    status: TaskStatus
    created_at: datetime
    deadline: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def time_spent_days(self) -> Optional[int]:
        """Whole days from creation to completion, None while not completed"""
        if self.status != TaskStatus.completed or self.completed_at is None:
            return None
        return (self.completed_at - self.created_at).days


class SnapshotProject(BaseModel):
    id: UUID
    name: str


class SnapshotTeam(BaseModel):
    id: UUID
    name: str
    member_names: List[str] = Field(default_factory=list)
    project_ids: Set[UUID] = Field(default_factory=set)


class SnapshotMember(BaseModel):
    id: UUID
    name: str


class ReportSnapshot(BaseModel):
    projects: List[SnapshotProject] = Field(default_factory=list)
    tasks: List[ReportTask] = Field(default_factory=list)
    teams: List[SnapshotTeam] = Field(default_factory=list)
    members: List[SnapshotMember] = Field(default_factory=list)


# ============================================================================
# Outputs
# ============================================================================


class ChartDataPoint(BaseModel):
    date: str
    value: int


class ProjectPerformanceData(BaseModel):
    project_id: str
    name: str
    total_tasks: int
    completed_tasks: int
    completion_rate: int
    overdue_tasks: int
    avg_time_per_task: float


class TaskDistributionData(BaseModel):
    status: str
    count: int
    percentage: int


class TeamProductivityData(BaseModel):
    team_id: str
    name: str
    members: List[str]
    completed_tasks: int
    in_progress_tasks: int
    overdue_tasks: int
    avg_tasks_per_member: float


class FilterOption(BaseModel):
    id: str
    name: str


class FilterOptions(BaseModel):
    """Choices offered by the report filter bar"""

    projects: List[FilterOption]
    teams: List[FilterOption]
    members: List[FilterOption]


class KPIMetrics(BaseModel):
    completed_tasks: int
    pending_tasks: int
    average_resolution_time: float
    weekly_burndown: int
    avg_load_per_member: float


# ============================================================================
# Functions
# ============================================================================


def js_round(value: float) -> int:
    """Round half up, as the web client does"""
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    return js_round(value * 10) / 10


def percentage(part: int, total: int) -> int:
    if total == 0:
        return 0
    return js_round(part / total * 100)


def resolve_date_range(period: ReportPeriod, today: date) -> DateRange:
    if isinstance(period, CustomPeriod):
        return DateRange(
            start=datetime.combine(period.start_date, time.min),
            end=datetime.combine(period.end_date, time.max),
        )

    start_of_today = datetime.combine(today, time.min)
    end = datetime.combine(today, time.max)
    if period.kind == "day":
        return DateRange(start=start_of_today, end=end)
    return DateRange(start=start_of_today - PERIOD_OFFSETS[period.kind], end=end)


def filter_tasks(
    snapshot: ReportSnapshot, filters: ReportFilters, date_range: DateRange
) -> List[ReportTask]:
    def keep(task: ReportTask) -> bool:
        if not date_range.contains(task.created_at):
            return False
        if filters.projects and task.project_id not in filters.projects:
            return False
        if filters.status != "all" and task.status.value != filters.status:
            return False
        if filters.members and not filters.members.intersection(task.assignee_ids):
            return False
        return True

    return [task for task in snapshot.tasks if keep(task)]


def build_timeline(tasks: List[ReportTask], date_range: DateRange) -> List[ChartDataPoint]:
    completed_per_day: Dict[date, int] = {}
    for task in tasks:
        if task.status != TaskStatus.completed:
            continue
        day = (task.completed_at or task.created_at).date()
        completed_per_day[day] = completed_per_day.get(day, 0) + 1

    points = []
    day = date_range.start.date()
    last_day = date_range.end.date()
    while day <= last_day:
        points.append(
            ChartDataPoint(date=day.isoformat(), value=completed_per_day.get(day, 0))
        )
        day += timedelta(days=1)
    return points


def build_project_performance(
    snapshot: ReportSnapshot, tasks: List[ReportTask]
) -> List[ProjectPerformanceData]:
    rows = []
    for project in snapshot.projects:
        project_tasks = [t for t in tasks if t.project_id == project.id]
        completed = [t for t in project_tasks if t.status == TaskStatus.completed]
        avg_time = (
            sum(t.time_spent_days or 0 for t in completed) / len(completed)
            if completed
            else 0
        )
        rows.append(
            ProjectPerformanceData(
                project_id=str(project.id),
                name=project.name,
                total_tasks=len(project_tasks),
                completed_tasks=len(completed),
                completion_rate=percentage(len(completed), len(project_tasks)),
                overdue_tasks=sum(
                    1 for t in project_tasks if t.status == TaskStatus.overdue
                ),
                avg_time_per_task=avg_time,
            )
        )
    return rows


def build_task_distribution(tasks: List[ReportTask]) -> List[TaskDistributionData]:
    total = len(tasks)
    rows = []
    for status in DISTRIBUTION_ORDER:
        count = sum(1 for t in tasks if t.status == status)
        rows.append(
            TaskDistributionData(
                status=status.value, count=count, percentage=percentage(count, total)
            )
        )
    return rows


def build_team_productivity(
    snapshot: ReportSnapshot, tasks: List[ReportTask], team_ids: Set[UUID]
) -> List[TeamProductivityData]:
    rows = []
    for team in snapshot.teams:
        if team_ids and team.id not in team_ids:
            continue
        team_tasks = [t for t in tasks if t.project_id in team.project_ids]
        member_count = len(team.member_names)
        rows.append(
            TeamProductivityData(
                team_id=str(team.id),
                name=team.name,
                members=list(team.member_names),
                completed_tasks=sum(
                    1 for t in team_tasks if t.status == TaskStatus.completed
                ),
                in_progress_tasks=sum(
                    1 for t in team_tasks if t.status == TaskStatus.in_progress
                ),
                overdue_tasks=sum(
                    1 for t in team_tasks if t.status == TaskStatus.overdue
                ),
                avg_tasks_per_member=(
                    len(team_tasks) / member_count if member_count else 0
                ),
            )
        )
    return rows


def build_kpis(tasks: List[ReportTask]) -> KPIMetrics:
    completed = [t for t in tasks if t.status == TaskStatus.completed]
    pending = sum(1 for t in tasks if t.status == TaskStatus.pending)

    resolution_days = [
        t.time_spent_days for t in completed if t.time_spent_days is not None
    ]
    avg_resolution = (
        sum(resolution_days) / len(resolution_days) if resolution_days else 0
    )

    # Tasks without assignees count as one "Unassigned" member
    members = {t.assignee for t in tasks}
    avg_load = len(tasks) / len(members) if members else 0

    return KPIMetrics(
        completed_tasks=len(completed),
        pending_tasks=pending,
        average_resolution_time=round_one_decimal(avg_resolution),
        weekly_burndown=percentage(len(completed), len(tasks)),
        avg_load_per_member=round_one_decimal(avg_load),
    )


CATEGORY_STATUSES = {
    "completed": TaskStatus.completed,
    "completedTasks": TaskStatus.completed,
    "pending": TaskStatus.pending,
    "pendingTasks": TaskStatus.pending,
    "in-progress": TaskStatus.in_progress,
    "overdue": TaskStatus.overdue,
}


def tasks_by_category(tasks: List[ReportTask], category: str) -> List[ReportTask]:
    status = CATEGORY_STATUSES.get(category)
    if status is None:
        return []
    return [t for t in tasks if t.status == status]


def build_filter_options(snapshot: ReportSnapshot) -> FilterOptions:
    """Projects, teams and people the user can filter on, sorted by name"""

    def options(items) -> List[FilterOption]:
        unique = {}
        for item in items:
            unique.setdefault(item.id, item.name)
        return [
            FilterOption(id=str(item_id), name=name)
            for item_id, name in sorted(unique.items(), key=lambda kv: (kv[1].lower(), str(kv[0])))
        ]

    return FilterOptions(
        projects=options(snapshot.projects),
        teams=options(snapshot.teams),
        members=options(snapshot.members),
    )
