"""
Script to write the filtered marketing report to a CSV file
"""

import argparse
import sys
import os
import logging
from pathlib import Path

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from analytics.aggregation import DashboardAggregator
from analytics.export import export_csv, export_filename
from core.database import SessionLocal
from core.exceptions import StorageError
from core.logging import setup_logging
from schemas.dashboard import RecordFilter
from storage.kv import SQLKeyValueStore
from storage.repositories import build_repositories

setup_logging()
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Export marketing records to CSV")
    parser.add_argument("--category", default="all", help="Category or 'all'")
    parser.add_argument("--channel", default="all", help="Channel or 'all'")
    parser.add_argument("--date-from", default=None, help="Earliest record date, YYYY-MM-DD")
    parser.add_argument("--date-to", default=None, help="Latest record date, YYYY-MM-DD")
    parser.add_argument("--output-dir", default=".", help="Directory for the report file")
    return parser.parse_args(argv)


def export_report(argv=None) -> Path:
    args = parse_args(argv)

    record_filter = RecordFilter(
        category=args.category,
        channel=args.channel,
        date_from=args.date_from,
        date_to=args.date_to,
    )

    repositories = build_repositories(SQLKeyValueStore(SessionLocal))
    records = DashboardAggregator(record_filter).filter(repositories.records.get_all())

    output_path = Path(args.output_dir) / export_filename()
    output_path.write_text(export_csv(records), encoding="utf-8")

    logger.info(f"Wrote {len(records)} records to {output_path}")
    return output_path


if __name__ == "__main__":
    try:
        export_report()
    except StorageError as e:
        logger.error(f"Export failed: {str(e)}")
        sys.exit(1)
