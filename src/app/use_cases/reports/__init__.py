"""
Reports Use Cases

Analytics report, drill-down, filter options and CSV export.
"""

from .dtos import (
    DateRangeResponse,
    ExportDataset,
    ExportReportResponse,
    FilterOptions,
    ReportResponse,
    TasksByCategoryResponse,
)
from .export_report_use_case import ExportReportUseCase
from .generate_report_use_case import GenerateReportUseCase
from .get_report_filter_options_use_case import GetReportFilterOptionsUseCase
from .get_tasks_by_category_use_case import GetTasksByCategoryUseCase

__all__ = [
    # Use Cases
    "GenerateReportUseCase",
    "GetTasksByCategoryUseCase",
    "GetReportFilterOptionsUseCase",
    "ExportReportUseCase",
    # DTOs
    "DateRangeResponse",
    "ExportDataset",
    "ExportReportResponse",
    "FilterOptions",
    "ReportResponse",
    "TasksByCategoryResponse",
]
