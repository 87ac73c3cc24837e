"""
CSV report export of filtered marketing records
"""

from typing import Iterable, List, Optional, Union
from datetime import datetime
import pandas as pd
import logging

from analytics.aggregation import spend_or_budget, revenue, leads
from core.config import settings
from schemas.entities import MarketingRecord

logger = logging.getLogger(__name__)

EXPORT_COLUMNS: List[str] = [
    "ID", "Tanggal", "Kategori", "Channel", "Objective", "Spend/Budget", "Revenue", "Leads",
]


def _plain_number(value: float) -> Union[int, float]:
    """Whole numbers render without a trailing .0"""
    return int(value) if float(value).is_integer() else value


def build_export_frame(records: Iterable[MarketingRecord]) -> pd.DataFrame:
    rows = [
        [
            record.id,
            record.date.isoformat(),
            record.category.value,
            record.channel.value,
            record.objective.value,
            _plain_number(spend_or_budget(record)),
            _plain_number(revenue(record)),
            _plain_number(leads(record)),
        ]
        for record in records
    ]
    # object dtype keeps ints and floats from being upcast column-wide
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS, dtype=object)


def export_csv(records: Iterable[MarketingRecord]) -> str:
    """
    Comma-delimited report, one row per record under a fixed header.

    Meant for offline analysis; it is not read back by the dashboard.
    """
    df = build_export_frame(records)
    logger.info(f"Exporting {len(df)} records to CSV")
    return df.to_csv(index=False, lineterminator="\n")


def export_filename(now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.utcnow()).strftime("%Y%m%dT%H%M%S")
    return f"{settings.EXPORT_FILENAME_PREFIX}_{stamp}.csv"
