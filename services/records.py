"""
Marketing record data entry
"""

from typing import List, Optional
import logging
import uuid

from analytics.aggregation import search_records
from core.exceptions import AccessDeniedError, ResourceNotFoundError
from schemas.entities import MarketingRecord, MarketingRecordCreate, User
from services.access import Capability, can_create_in
from storage.repositories import CollectionRepository, MARKETING_RECORDS

logger = logging.getLogger(__name__)


class RecordService:
    """Create, edit, list and delete marketing records for the data view"""

    def __init__(self, records: CollectionRepository[MarketingRecord]):
        self.records = records

    def list_records(self, search: Optional[str] = None) -> List[MarketingRecord]:
        return search_records(self.records.get_all(), search)

    def get_record(self, record_id: str) -> MarketingRecord:
        record = self.records.get(record_id)
        if record is None:
            raise ResourceNotFoundError(
                "Marketing record not found",
                context={"collection": MARKETING_RECORDS, "entity_id": record_id}
            )
        return record

    def save_record(
        self,
        user: User,
        capability: Capability,
        payload: MarketingRecordCreate,
        record_id: Optional[str] = None
    ) -> MarketingRecord:
        """
        Create a record, or replace the one with ``record_id``.

        The category must be one the user's role may log under. The saving
        user becomes the record's owner, as on the data-entry form.
        """
        if not can_create_in(capability, payload.category):
            raise AccessDeniedError(
                f"Role {capability.role.value} cannot log {payload.category.value} records",
                context={"role": capability.role.value, "category": payload.category.value}
            )

        if record_id is not None:
            self.get_record(record_id)

        record = MarketingRecord(
            id=record_id or str(uuid.uuid4()),
            user_id=user.id,
            **payload.model_dump()
        )
        self.records.upsert(record)

        logger.info(
            f"{'Updated' if record_id else 'Created'} {record.channel.value} record "
            f"{record.id} for {record.date.isoformat()}"
        )
        return record

    def delete_record(self, record_id: str) -> bool:
        return self.records.delete_by_id(record_id)
