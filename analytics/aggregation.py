"""
Dashboard aggregation over marketing records.

Turns a list of MarketingRecord plus a RecordFilter into the filtered set,
summary totals, channel distribution and a per-day time series.

Metric values that are missing or not numeric count as zero. That is a
tolerated data-quality policy, so nothing here raises for bad metric data.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import datetime
import logging

from models.base import Channel, MetricField
from schemas.dashboard import RecordFilter, SummaryTotals, TimeSeriesPoint, DashboardSnapshot
from schemas.entities import MarketingRecord, parse_metric_number

logger = logging.getLogger(__name__)

# First present numeric key wins
SPEND_KEYS: Tuple[str, ...] = (MetricField.SPEND.value, MetricField.BUDGET.value)
REVENUE_KEYS: Tuple[str, ...] = (MetricField.REVENUE.value,)
LEADS_KEYS: Tuple[str, ...] = (MetricField.LEADS.value,)
REACH_KEYS: Tuple[str, ...] = (MetricField.REACH.value,)


def metric_value(record: MarketingRecord, keys: Sequence[str]) -> float:
    """Value of the first key holding a number, or 0.0"""
    for key in keys:
        number = parse_metric_number(record.metrics.get(key))
        if number is not None:
            return number
    return 0.0


def spend_or_budget(record: MarketingRecord) -> float:
    return metric_value(record, SPEND_KEYS)


def revenue(record: MarketingRecord) -> float:
    return metric_value(record, REVENUE_KEYS)


def leads(record: MarketingRecord) -> float:
    return metric_value(record, LEADS_KEYS)


def reach(record: MarketingRecord) -> float:
    return metric_value(record, REACH_KEYS)


def search_records(records: Iterable[MarketingRecord], term: Optional[str] = None) -> List[MarketingRecord]:
    """
    Data-table listing: case-insensitive match on channel or category,
    newest first.
    """
    needle = (term or "").strip().lower()
    matched = [
        record for record in records
        if not needle
        or needle in record.channel.value.lower()
        or needle in record.category.value.lower()
    ]
    return sorted(matched, key=lambda r: r.date, reverse=True)


class DashboardAggregator:
    """
    Aggregate marketing records for the dashboard view.

    Handles:
    - Category/channel/date filtering
    - Summary totals (spend-or-budget, revenue, leads, reach)
    - Record counts per channel
    - Revenue and spend per calendar day
    """

    def __init__(self, record_filter: Optional[RecordFilter] = None):
        self.record_filter = record_filter or RecordFilter()

    def filter(self, records: Iterable[MarketingRecord]) -> List[MarketingRecord]:
        return [record for record in records if self.record_filter.matches(record)]

    @staticmethod
    def summarize(records: Sequence[MarketingRecord]) -> SummaryTotals:
        total_spend = sum(spend_or_budget(r) for r in records)
        total_revenue = sum(revenue(r) for r in records)

        return SummaryTotals(
            record_count=len(records),
            total_spend=total_spend,
            total_revenue=total_revenue,
            total_leads=sum(leads(r) for r in records),
            total_reach=sum(reach(r) for r in records),
            roas=round(total_revenue / total_spend, 4) if total_spend > 0 else None,
        )

    @staticmethod
    def channel_distribution(records: Iterable[MarketingRecord]) -> Dict[Channel, int]:
        counts: Dict[Channel, int] = {}
        for record in records:
            counts[record.channel] = counts.get(record.channel, 0) + 1
        return counts

    @staticmethod
    def time_series(records: Iterable[MarketingRecord]) -> List[TimeSeriesPoint]:
        """Revenue and spend-or-budget per day, oldest first"""
        buckets: Dict[datetime.date, TimeSeriesPoint] = {}
        for record in sorted(records, key=lambda r: r.date):
            point = buckets.get(record.date)
            if point is None:
                point = buckets[record.date] = TimeSeriesPoint(date=record.date)
            point.revenue += revenue(record)
            point.spend += spend_or_budget(record)
        return list(buckets.values())

    def snapshot(self, records: Iterable[MarketingRecord]) -> DashboardSnapshot:
        filtered = self.filter(records)

        logger.debug(
            f"Aggregating {len(filtered)} records "
            f"(filters: {self.record_filter.applied() or 'none'})"
        )

        return DashboardSnapshot(
            filters_applied=self.record_filter.applied(),
            summary=self.summarize(filtered),
            channel_distribution=self.channel_distribution(filtered),
            time_series=self.time_series(filtered),
        )
