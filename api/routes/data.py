"""
Marketing record endpoints: search, pagination and data entry
"""

from fastapi import APIRouter, Depends, Query, Request
from api.dependencies import get_repositories, get_current_user, require_view
from models.base import View
from schemas.api import RecordListResponse, PaginationMetadata
from schemas.entities import MarketingRecord, MarketingRecordCreate, User
from services.access import Capability
from services.records import RecordService
from storage.repositories import Repositories
from typing import Optional
import time
import uuid
import math
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/data", tags=["Data"])


@router.get("", response_model=RecordListResponse)
def list_records(
    request: Request,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(50, ge=1, le=1000, description="Items per page"),
    search: Optional[str] = Query(None, description="Match channel or category"),
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.DATA))
):
    """
    Marketing records, newest first.

    Features:
    - Case-insensitive search on channel and category
    - Pagination
    """
    start_time = time.time()
    request_id = getattr(request.state, "request_id", f"req_{uuid.uuid4().hex[:12]}")

    logger.info(f"[{request_id}] GET /data - page={page}, page_size={page_size}, search={search}")

    records = RecordService(repositories.records).list_records(search)

    total_items = len(records)
    total_pages = math.ceil(total_items / page_size) if total_items > 0 else 0
    offset = (page - 1) * page_size
    items = records[offset:offset + page_size]

    api_latency_ms = (time.time() - start_time) * 1000
    logger.info(f"[{request_id}] Returned {len(items)} records ({api_latency_ms:.2f}ms)")

    return RecordListResponse(
        items=items,
        pagination=PaginationMetadata(
            current_page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1
        ),
        filters_applied={"search": search} if search else {}
    )


@router.get("/{record_id}", response_model=MarketingRecord)
def get_record(
    record_id: str,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.DATA))
):
    return RecordService(repositories.records).get_record(record_id)


@router.post("", response_model=MarketingRecord, status_code=201)
def create_record(
    payload: MarketingRecordCreate,
    repositories: Repositories = Depends(get_repositories),
    user: User = Depends(get_current_user),
    capability: Capability = Depends(require_view(View.DATA))
):
    return RecordService(repositories.records).save_record(user, capability, payload)


@router.put("/{record_id}", response_model=MarketingRecord)
def update_record(
    record_id: str,
    payload: MarketingRecordCreate,
    repositories: Repositories = Depends(get_repositories),
    user: User = Depends(get_current_user),
    capability: Capability = Depends(require_view(View.DATA))
):
    return RecordService(repositories.records).save_record(user, capability, payload, record_id=record_id)


@router.delete("/{record_id}", status_code=204)
def delete_record(
    record_id: str,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.DATA))
):
    """Deleting an unknown id is a no-op"""
    RecordService(repositories.records).delete_record(record_id)
