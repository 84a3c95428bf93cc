"""
Loads the data a report is computed from.

The snapshot covers the projects the user can access (owned, joined, or
linked to a team the user belongs to), the teams the user leads or belongs
to, and the people found in either.
"""

from datetime import date
from typing import Dict, List, Optional, Tuple

from libs.result import Error
from src.app.services.analytics import (
    CustomPeriod,
    DateRange,
    ReportFilters,
    ReportSnapshot,
    ReportTask,
    SnapshotMember,
    SnapshotProject,
    SnapshotTeam,
    UNASSIGNED,
    UNKNOWN_PROJECT,
    filter_tasks,
    resolve_date_range,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser


def check_filters(filters: ReportFilters) -> Optional[Error]:
    period = filters.period
    if isinstance(period, CustomPeriod) and period.start_date > period.end_date:
        return Error("INVALID_PERIOD", "Start date must not be after end date")
    return None


async def load_snapshot(uow: UnitOfWork, user: ActingUser) -> ReportSnapshot:
    projects = await uow.projects.get_accessible_by_user(user.id)
    project_ids = [p.id for p in projects]
    project_names = {p.id: p.name for p in projects}

    teams = await uow.teams.get_by_user(user.id)
    team_ids = [t.id for t in teams]
    members = await uow.teams.get_members(team_ids) if team_ids else []
    links = await uow.teams.get_project_links(team_ids) if team_ids else []

    snapshot_teams = []
    for team in teams:
        snapshot_teams.append(
            SnapshotTeam(
                id=team.id,
                name=team.name,
                member_names=[m.user_name for m in members if m.team_id == team.id],
                project_ids={link.project_id for link in links if link.team_id == team.id},
            )
        )

    # First linked team wins when a project is shared by several teams
    project_team: Dict = {}
    for team in snapshot_teams:
        for project_id in team.project_ids:
            project_team.setdefault(project_id, team.name)

    tasks = await uow.tasks.get_by_project_ids(project_ids) if project_ids else []
    assignees = await uow.tasks.get_assignees([t.id for t in tasks]) if tasks else []

    report_tasks = []
    for task in tasks:
        task_assignees = [a for a in assignees if a.task_id == task.id]
        report_tasks.append(
            ReportTask(
                id=task.id,
                title=task.title,
                description=task.description,
                project_id=task.project_id,
                project=project_names.get(task.project_id, UNKNOWN_PROJECT),
                team=project_team.get(task.project_id),
                assignee_ids=[a.user_id for a in task_assignees],
                assignee=task_assignees[0].user_name if task_assignees else UNASSIGNED,
                priority=task.priority.value,
                status=task.status,
                created_at=task.created_at,
                deadline=task.deadline,
                completed_at=task.completed_at,
            )
        )

    project_members = await uow.projects.get_members(project_ids) if project_ids else []
    people = [SnapshotMember(id=m.user_id, name=m.user_name) for m in members]
    people += [SnapshotMember(id=m.user_id, name=m.user_name) for m in project_members]
    people += [SnapshotMember(id=a.user_id, name=a.user_name) for a in assignees]

    return ReportSnapshot(
        projects=[SnapshotProject(id=p.id, name=p.name) for p in projects],
        tasks=report_tasks,
        teams=snapshot_teams,
        members=people,
    )


async def load_filtered_tasks(
    uow: UnitOfWork, user: ActingUser, filters: ReportFilters, today: date
) -> Tuple[ReportSnapshot, DateRange, List[ReportTask]]:
    snapshot = await load_snapshot(uow, user)
    date_range = resolve_date_range(filters.period, today)
    return snapshot, date_range, filter_tasks(snapshot, filters, date_range)
