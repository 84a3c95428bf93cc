"""
Reports Use Case DTOs
"""

from typing import List, Literal

from pydantic import BaseModel

from src.app.services.analytics import (
    ChartDataPoint,
    FilterOptions,
    KPIMetrics,
    ProjectPerformanceData,
    ReportFilters,
    ReportTask,
    TaskDistributionData,
    TeamProductivityData,
)

ExportDataset = Literal["tasks", "teams"]


class DateRangeResponse(BaseModel):
    start: str
    end: str


class ReportResponse(BaseModel):
    """Everything the reports page renders for one set of filters"""

    filters: ReportFilters
    date_range: DateRangeResponse
    kpis: KPIMetrics
    timeline: List[ChartDataPoint]
    project_performance: List[ProjectPerformanceData]
    task_distribution: List[TaskDistributionData]
    team_productivity: List[TeamProductivityData]
    tasks: List[ReportTask]


class TasksByCategoryResponse(BaseModel):
    category: str
    tasks: List[ReportTask]


class ExportReportResponse(BaseModel):
    filename: str
    content: str
