"""
Dashboard aggregation and CSV export endpoints
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from api.dependencies import get_repositories, require_view
from analytics.aggregation import DashboardAggregator
from analytics.export import export_csv, export_filename
from models.base import View
from schemas.dashboard import DashboardSnapshot, RecordFilter
from services.access import Capability
from storage.repositories import Repositories
from typing import Optional
import datetime
import uuid
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_record_filter(
    category: Optional[str] = Query("all", description="Category or 'all'"),
    channel: Optional[str] = Query("all", description="Channel or 'all'"),
    date_from: Optional[datetime.date] = Query(None, description="Earliest record date (inclusive)"),
    date_to: Optional[datetime.date] = Query(None, description="Latest record date (inclusive)"),
) -> RecordFilter:
    return RecordFilter(category=category, channel=channel, date_from=date_from, date_to=date_to)


@router.get("", response_model=DashboardSnapshot)
def get_dashboard(
    record_filter: RecordFilter = Depends(get_record_filter),
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.DASHBOARD))
):
    """
    Dashboard for the selected filter.

    Returns:
    - Summary totals (spend/budget, revenue, leads, reach)
    - Record count per channel
    - Revenue and spend per day
    """
    request_id = f"req_{uuid.uuid4().hex[:12]}"
    logger.info(f"[{request_id}] GET /dashboard - filters: {record_filter.applied() or 'none'}")

    snapshot = DashboardAggregator(record_filter).snapshot(repositories.records.get_all())

    logger.info(
        f"[{request_id}] Dashboard: {snapshot.summary.record_count} records, "
        f"{len(snapshot.time_series)} days"
    )
    return snapshot


@router.get("/export")
def export_dashboard(
    record_filter: RecordFilter = Depends(get_record_filter),
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.DASHBOARD))
):
    """Filtered records as a CSV download"""
    records = DashboardAggregator(record_filter).filter(repositories.records.get_all())
    filename = export_filename()

    return Response(
        content=export_csv(records),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
