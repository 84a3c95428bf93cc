from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from src.api.error import ClientError, ServerError
from src.app.services.analytics import ReportFilters
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.reports import (
    ExportDataset,
    ExportReportUseCase,
    FilterOptions,
    GenerateReportUseCase,
    GetReportFilterOptionsUseCase,
    GetTasksByCategoryUseCase,
    ReportResponse,
    TasksByCategoryResponse,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ActingUser

router = APIRouter(prefix="/reports", tags=["Reports"])


def _raise_for_report_error(error):
    if error.code == "INVALID_PERIOD":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("/filter-options", response_model=FilterOptions)
async def get_report_filter_options(
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Projects, teams and members offered by the report filters"""
    result = await GetReportFilterOptionsUseCase(uow).execute(current_user)
    if result.is_err():
        _raise_for_report_error(result.error)
    return result.value


@router.post("", response_model=ReportResponse)
async def generate_report(
    filters: ReportFilters,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Generate Report

    KPIs, completion timeline, project performance, status distribution and
    team productivity for the projects the user can access.

    Raises:
        - 400 Bad Request: INVALID_PERIOD
    """
    result = await GenerateReportUseCase(uow).execute(current_user, filters)
    if result.is_err():
        _raise_for_report_error(result.error)
    return result.value


@router.post("/tasks/{category}", response_model=TasksByCategoryResponse)
async def get_tasks_by_category(
    category: str,
    filters: ReportFilters,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Drill-down: completed, pending, in-progress or overdue tasks"""
    result = await GetTasksByCategoryUseCase(uow).execute(
        current_user, filters, category
    )
    if result.is_err():
        _raise_for_report_error(result.error)
    return result.value


@router.post("/export")
async def export_report(
    filters: ReportFilters,
    dataset: ExportDataset = Query("tasks"),
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """CSV export of the filtered tasks or of the team productivity rows"""
    result = await ExportReportUseCase(uow).execute(current_user, filters, dataset)
    if result.is_err():
        _raise_for_report_error(result.error)

    export = result.value
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
