"""
Unit tests for the CSV report export
"""

from datetime import datetime
from analytics.export import EXPORT_COLUMNS, build_export_frame, export_csv, export_filename

HEADER = "ID,Tanggal,Kategori,Channel,Objective,Spend/Budget,Revenue,Leads"


class TestExportCsv:
    """Test CSV rendering"""

    def test_header_and_rows(self, mock_records):
        lines = export_csv(mock_records).splitlines()

        # Assertions
        assert lines[0] == HEADER
        assert len(lines) == 1 + len(mock_records)
        assert lines[1] == "rec_001,2024-01-15,Organik,Facebook,Awareness,50000,100000,4"
        assert lines[2] == "rec_002,2024-01-14,Paid Ads,Meta Ads,Conversion,200000,600000,10"

    def test_fractional_and_missing_numbers(self, mock_records):
        lines = export_csv(mock_records).splitlines()

        assert lines[3] == "rec_003,2024-01-15,Paid Ads,Google Ads,Consideration,75000.5,0,0"
        assert lines[4] == "rec_004,2024-01-16,Organik,Instagram,Awareness,0,0,0"

    def test_empty_set_is_header_only(self):
        assert export_csv([]) == HEADER + "\n"

    def test_frame_columns(self, mock_records):
        df = build_export_frame(mock_records)

        assert list(df.columns) == EXPORT_COLUMNS
        assert len(df) == 4


def test_export_filename():
    name = export_filename(datetime(2024, 1, 15, 9, 30, 5))

    assert name == "marketing_report_20240115T093005.csv"


def test_export_report_script(session_factory, repositories, mock_records, tmp_path, monkeypatch):
    from scripts import export_report as export_script

    for record in mock_records:
        repositories.records.upsert(record)
    monkeypatch.setattr(export_script, "SessionLocal", session_factory)

    path = export_script.export_report(["--category", "Paid Ads", "--output-dir", str(tmp_path)])

    lines = path.read_text(encoding="utf-8").splitlines()
    assert path.parent == tmp_path
    assert path.name.startswith("marketing_report_")
    assert [line.split(",")[0] for line in lines[1:]] == ["rec_002", "rec_003"]
