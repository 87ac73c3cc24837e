"""
Marketing metric schema and dashboard aggregation.

Modules:
    registry: Static channel → metric fields and category → channels tables
    aggregation: Filtering, summary totals, channel distribution, time series
    export: CSV report of a filtered record set

Usage:
    from analytics.registry import metric_fields_for, channels_for
    from analytics.aggregation import DashboardAggregator
    from analytics.export import export_csv

Example:
    aggregator = DashboardAggregator(RecordFilter(category="Paid Ads"))
    snapshot = aggregator.snapshot(repositories.records.get_all())
    print(snapshot.summary.total_spend)
"""

__all__ = [
    "registry",
    "aggregation",
    "export",
]
