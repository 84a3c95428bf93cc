from datetime import date, datetime
from uuid import uuid4

import pytest

from src.app.services.analytics import (
    CustomPeriod,
    DateRange,
    PresetPeriod,
    ReportFilters,
    ReportSnapshot,
    ReportTask,
    SnapshotMember,
    SnapshotProject,
    SnapshotTeam,
    build_filter_options,
    build_kpis,
    build_project_performance,
    build_task_distribution,
    build_team_productivity,
    build_timeline,
    filter_tasks,
    js_round,
    resolve_date_range,
    tasks_by_category,
)
from src.domain.entities import TaskStatus

TODAY = date(2025, 3, 10)

PROJECT_A = uuid4()
PROJECT_B = uuid4()
ANA = uuid4()
CARLOS = uuid4()


def make_task(status, project_id=PROJECT_A, created=datetime(2025, 3, 5, 9), completed=None, assignees=None):
    assignees = assignees or []
    return ReportTask(
        id=uuid4(),
        title=f"{status.value} task",
        project_id=project_id,
        project="Projeto A" if project_id == PROJECT_A else "Projeto B",
        assignee_ids=[a for a, _ in assignees],
        assignee=assignees[0][1] if assignees else "Unassigned",
        priority="medium",
        status=status,
        created_at=created,
        completed_at=completed,
    )


@pytest.fixture
def snapshot():
    tasks = [
        make_task(TaskStatus.completed, completed=datetime(2025, 3, 7, 15), assignees=[(ANA, "Ana")]),
        make_task(TaskStatus.completed, completed=datetime(2025, 3, 8, 10), assignees=[(CARLOS, "Carlos")]),
        make_task(TaskStatus.pending, assignees=[(ANA, "Ana")]),
        make_task(TaskStatus.in_progress, project_id=PROJECT_B, assignees=[(CARLOS, "Carlos")]),
        make_task(TaskStatus.overdue, project_id=PROJECT_B),
        # Outside the last week
        make_task(TaskStatus.completed, created=datetime(2025, 1, 2), completed=datetime(2025, 1, 3)),
    ]
    return ReportSnapshot(
        projects=[
            SnapshotProject(id=PROJECT_A, name="Projeto A"),
            SnapshotProject(id=PROJECT_B, name="Projeto B"),
        ],
        tasks=tasks,
        teams=[
            SnapshotTeam(id=uuid4(), name="Produto", member_names=["Ana", "Carlos"], project_ids={PROJECT_A}),
            SnapshotTeam(id=uuid4(), name="QA", member_names=[], project_ids={PROJECT_B}),
        ],
    )


def week_range():
    return resolve_date_range(PresetPeriod(kind="week"), TODAY)


def test_js_round_rounds_half_up():
    assert js_round(2.5) == 3
    assert js_round(0.5) == 1
    assert js_round(66.666) == 67
    assert js_round(33.333) == 33


@pytest.mark.parametrize(
    "kind,expected_start",
    [
        ("day", datetime(2025, 3, 10)),
        ("week", datetime(2025, 3, 3)),
        ("month", datetime(2025, 2, 10)),
        ("quarter", datetime(2024, 12, 10)),
        ("year", datetime(2024, 3, 10)),
    ],
)
def test_preset_periods_end_at_end_of_today(kind, expected_start):
    date_range = resolve_date_range(PresetPeriod(kind=kind), TODAY)

    assert date_range.start == expected_start
    assert date_range.end.date() == TODAY
    assert date_range.end.hour == 23 and date_range.end.minute == 59


def test_month_period_clamps_to_shorter_month():
    date_range = resolve_date_range(PresetPeriod(kind="month"), date(2025, 3, 31))

    assert date_range.start == datetime(2025, 2, 28)


def test_custom_period_covers_whole_days():
    period = CustomPeriod(start_date=date(2025, 3, 1), end_date=date(2025, 3, 2))

    date_range = resolve_date_range(period, TODAY)

    assert date_range.start == datetime(2025, 3, 1, 0, 0)
    assert date_range.end.date() == date(2025, 3, 2)
    assert date_range.contains(datetime(2025, 3, 2, 23, 59, 59))


def test_filter_by_date_range(snapshot):
    tasks = filter_tasks(snapshot, ReportFilters(period=PresetPeriod(kind="week")), week_range())

    assert len(tasks) == 5


def test_filter_by_project_status_and_member(snapshot):
    filters = ReportFilters(
        period=PresetPeriod(kind="week"),
        projects={PROJECT_A},
        status="completed",
        members={ANA},
    )

    tasks = filter_tasks(snapshot, filters, week_range())

    assert len(tasks) == 1
    assert tasks[0].assignee == "Ana"


def test_filtering_is_idempotent(snapshot):
    filters = ReportFilters(period=PresetPeriod(kind="week"), projects={PROJECT_A})
    once = filter_tasks(snapshot, filters, week_range())

    twice = filter_tasks(ReportSnapshot(projects=snapshot.projects, tasks=once, teams=snapshot.teams), filters, week_range())

    assert twice == once


def narrow(snapshot, tasks):
    return ReportSnapshot(projects=snapshot.projects, tasks=tasks, teams=snapshot.teams)


def test_filters_applied_in_any_order_give_same_tasks(snapshot):
    # Arrange: the same three criteria applied one at a time in two orders
    by_project = ReportFilters(projects={PROJECT_A, PROJECT_B}, period=PresetPeriod(kind="week"))
    by_status = ReportFilters(status="completed", period=PresetPeriod(kind="week"))
    by_member = ReportFilters(members={CARLOS}, period=PresetPeriod(kind="week"))
    combined = ReportFilters(
        projects={PROJECT_A, PROJECT_B},
        status="completed",
        members={CARLOS},
        period=PresetPeriod(kind="week"),
    )
    date_range = week_range()

    # Act
    forward = snapshot.tasks
    for filters in (by_project, by_status, by_member):
        forward = filter_tasks(narrow(snapshot, forward), filters, date_range)
    backward = snapshot.tasks
    for filters in (by_member, by_status, by_project):
        backward = filter_tasks(narrow(snapshot, backward), filters, date_range)
    at_once = filter_tasks(snapshot, combined, date_range)

    # Assert
    assert [t.id for t in forward] == [t.id for t in backward] == [t.id for t in at_once]
    assert len(at_once) == 1
    assert at_once[0].assignee == "Carlos"


def test_selection_order_does_not_change_report(snapshot):
    ids = [PROJECT_B, PROJECT_A]
    first = ReportFilters(projects=ids, members=[CARLOS, ANA], period=PresetPeriod(kind="week"))
    second = ReportFilters(projects=list(reversed(ids)), members=[ANA, CARLOS], period=PresetPeriod(kind="week"))

    assert first == second
    assert build_kpis(filter_tasks(snapshot, first, week_range())) == build_kpis(
        filter_tasks(snapshot, second, week_range())
    )


def test_same_filters_give_same_report(snapshot):
    filters = ReportFilters(period=PresetPeriod(kind="week"))

    first = build_task_distribution(filter_tasks(snapshot, filters, week_range()))
    second = build_task_distribution(filter_tasks(snapshot, filters, week_range()))

    assert first == second


def test_timeline_is_zero_filled_per_day(snapshot):
    date_range = week_range()
    tasks = filter_tasks(snapshot, ReportFilters(), date_range)

    timeline = build_timeline(tasks, date_range)

    assert len(timeline) == 8
    assert timeline[0].date == "2025-03-03"
    assert timeline[-1].date == "2025-03-10"
    by_day = {p.date: p.value for p in timeline}
    assert by_day["2025-03-07"] == 1
    assert by_day["2025-03-08"] == 1
    assert sum(by_day.values()) == 2


def test_timeline_falls_back_to_creation_date():
    date_range = DateRange(start=datetime(2025, 3, 1), end=datetime(2025, 3, 2, 23, 59))
    task = make_task(TaskStatus.completed, created=datetime(2025, 3, 2, 8))

    timeline = build_timeline([task], date_range)

    assert [p.value for p in timeline] == [0, 1]


def test_project_performance(snapshot):
    tasks = filter_tasks(snapshot, ReportFilters(), week_range())

    rows = {row.name: row for row in build_project_performance(snapshot, tasks)}

    assert rows["Projeto A"].total_tasks == 3
    assert rows["Projeto A"].completed_tasks == 2
    assert rows["Projeto A"].completion_rate == js_round(2 / 3 * 100)
    assert rows["Projeto B"].completion_rate == 0
    assert rows["Projeto B"].overdue_tasks == 1


def test_project_without_tasks_has_zero_rate(snapshot):
    rows = build_project_performance(snapshot, [])

    assert all(row.completion_rate == 0 and row.total_tasks == 0 for row in rows)


def test_distribution_percentages_sum_to_about_100(snapshot):
    tasks = filter_tasks(snapshot, ReportFilters(), week_range())

    rows = build_task_distribution(tasks)

    assert [row.status for row in rows] == ["pending", "in-progress", "completed", "overdue"]
    assert sum(row.count for row in rows) == len(tasks)
    assert abs(sum(row.percentage for row in rows) - 100) <= len(rows)


def test_distribution_with_no_tasks_is_all_zero():
    rows = build_task_distribution([])

    assert all(row.count == 0 and row.percentage == 0 for row in rows)


def test_team_productivity(snapshot):
    tasks = filter_tasks(snapshot, ReportFilters(), week_range())

    rows = {row.name: row for row in build_team_productivity(snapshot, tasks, set())}

    assert rows["Produto"].completed_tasks == 2
    assert rows["Produto"].avg_tasks_per_member == 1.5
    assert rows["QA"].in_progress_tasks == 1
    assert rows["QA"].overdue_tasks == 1
    assert rows["QA"].avg_tasks_per_member == 0


def test_team_selection_limits_rows(snapshot):
    selected = snapshot.teams[1].id

    rows = build_team_productivity(snapshot, snapshot.tasks, {selected})

    assert [row.name for row in rows] == ["QA"]


def test_kpis(snapshot):
    tasks = filter_tasks(snapshot, ReportFilters(), week_range())

    kpis = build_kpis(tasks)

    assert kpis.completed_tasks == 2
    assert kpis.pending_tasks == 1
    assert kpis.weekly_burndown == 40
    # 2 days and 3 days to completion
    assert kpis.average_resolution_time == 2.5
    # Ana, Carlos and Unassigned share 5 tasks
    assert kpis.avg_load_per_member == 1.7


def test_kpis_without_tasks():
    kpis = build_kpis([])

    assert kpis.completed_tasks == 0
    assert kpis.weekly_burndown == 0
    assert kpis.average_resolution_time == 0
    assert kpis.avg_load_per_member == 0


@pytest.mark.parametrize(
    "category,expected",
    [
        ("completed", 2),
        ("completedTasks", 2),
        ("pending", 1),
        ("pendingTasks", 1),
        ("in-progress", 1),
        ("overdue", 1),
        ("archived", 0),
    ],
)
def test_tasks_by_category(snapshot, category, expected):
    tasks = filter_tasks(snapshot, ReportFilters(), week_range())

    assert len(tasks_by_category(tasks, category)) == expected


def test_filter_options_are_sorted_and_deduplicated(snapshot):
    snapshot.members = [
        SnapshotMember(id=CARLOS, name="Carlos"),
        SnapshotMember(id=ANA, name="ana"),
        SnapshotMember(id=CARLOS, name="Carlos"),
    ]

    options = build_filter_options(snapshot)

    assert [p.name for p in options.projects] == ["Projeto A", "Projeto B"]
    assert [p.id for p in options.projects] == [str(PROJECT_A), str(PROJECT_B)]
    assert [t.name for t in options.teams] == ["Produto", "QA"]
    assert [(m.id, m.name) for m in options.members] == [(str(ANA), "ana"), (str(CARLOS), "Carlos")]


def test_filter_options_ignore_snapshot_order(snapshot):
    shuffled = ReportSnapshot(
        projects=list(reversed(snapshot.projects)),
        tasks=snapshot.tasks,
        teams=list(reversed(snapshot.teams)),
    )

    assert build_filter_options(shuffled) == build_filter_options(snapshot)
