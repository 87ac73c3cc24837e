"""
Unit tests for entity schemas
"""

import pytest
from datetime import date
from pydantic import ValidationError
from models.base import Category, Channel, Objective, Role, TaskStatus
from schemas.entities import MarketingRecord, MarketingRecordCreate, Task, User, parse_metric_number


class TestMetricResolution:
    """Metric values are resolved to number or text when a record is built"""

    def test_numeric_strings_become_floats(self):
        record = MarketingRecord(
            id="r1",
            user_id="1",
            date="2024-01-15",
            category="Organik",
            channel="Facebook",
            metrics={"Revenue": "100000", "Leads": 3, "Budget": " 2500.5 "}
        )

        # Assertions
        assert record.metrics["Revenue"] == 100000.0
        assert record.metrics["Leads"] == 3.0
        assert record.metrics["Budget"] == 2500.5
        assert record.date == date(2024, 1, 15)
        assert record.category == Category.ORGANIC
        assert record.objective == Objective.AWARENESS

    def test_text_fields_stay_text(self):
        record = MarketingRecord(
            id="r2",
            user_id="1",
            date="2024-01-15",
            category="Paid Ads",
            channel="Meta Ads",
            metrics={"Tanggal Mulai": "2024-01-01", "Noted": 123, "Spend": "abc"}
        )

        assert record.metrics["Tanggal Mulai"] == "2024-01-01"
        assert record.metrics["Noted"] == "123"
        assert record.metrics["Spend"] == "abc"

    def test_non_finite_values_stay_text(self):
        record = MarketingRecord(
            id="r3",
            user_id="1",
            date="2024-01-15",
            category="Paid Ads",
            channel="Meta Ads",
            metrics={"Spend": "nan", "Revenue": "inf"}
        )

        assert record.metrics == {"Spend": "nan", "Revenue": "inf"}

    def test_parse_metric_number(self):
        assert parse_metric_number("12") == 12.0
        assert parse_metric_number(7) == 7.0
        assert parse_metric_number("") is None
        assert parse_metric_number(None) is None
        assert parse_metric_number(True) is None
        assert parse_metric_number("1,000") is None

    @pytest.mark.parametrize("text", ["1_000", "\u0661\u0662", "\uff11\uff12", "0x10", "1e", "--1", "."])
    def test_only_plain_decimals_parse(self, text):
        assert parse_metric_number(text) is None

    @pytest.mark.parametrize("text, expected", [("-12.5", -12.5), ("+3", 3.0), (".5", 0.5), ("7.", 7.0), ("1e3", 1000.0), (" 42 ", 42.0)])
    def test_plain_decimal_forms(self, text, expected):
        assert parse_metric_number(text) == expected

    def test_underscored_metric_counts_as_text(self):
        record = MarketingRecord(
            id="r4",
            user_id="1",
            date="2024-01-15",
            category="Paid Ads",
            channel="Meta Ads",
            metrics={"Spend": "1_000"}
        )

        assert record.metrics["Spend"] == "1_000"


class TestMarketingRecordValidation:
    """Test channel/category consistency and metric key checks"""

    def test_channel_must_belong_to_category(self):
        with pytest.raises(ValidationError):
            MarketingRecord(
                id="bad",
                user_id="1",
                date="2024-01-15",
                category="Organik",
                channel="Meta Ads",
            )

    def test_unknown_channel_rejected(self):
        with pytest.raises(ValidationError):
            MarketingRecordCreate(date="2024-01-15", category="Organik", channel="Snapchat")

    def test_unknown_metric_keys_tolerated_by_default(self):
        payload = MarketingRecordCreate(
            date="2024-01-15",
            category="Organik",
            channel="Facebook",
            metrics={"Spend": "100", "Budget": "50"}
        )

        assert payload.metrics == {"Spend": 100.0, "Budget": 50.0}

    def test_unknown_metric_keys_rejected_in_strict_mode(self, strict_metric_keys):
        with pytest.raises(ValidationError) as exc_info:
            MarketingRecordCreate(
                date="2024-01-15",
                category="Organik",
                channel="Facebook",
                metrics={"Spend": "100"}
            )

        assert "Spend" in str(exc_info.value)

    def test_strict_mode_accepts_configured_keys(self, strict_metric_keys):
        payload = MarketingRecordCreate(
            date="2024-01-15",
            category="Paid Ads",
            channel="Google Ads",
            metrics={"Spend": "100", "Klik": "40"}
        )

        assert payload.channel == Channel.GOOGLE_ADS


class TestUserAndTask:

    def test_username_is_stripped(self):
        user = User(id="9", username="  dina ", password="x", role="ads_specialist")

        assert user.username == "dina"
        assert user.role == Role.ADS_SPECIALIST

    def test_blank_username_rejected(self):
        with pytest.raises(ValidationError):
            User(id="9", username="   ", password="x", role="admin")

    def test_task_defaults(self):
        task = Task(id="t9", title="Write brief")

        assert task.label == "Task"
        assert task.content == ""
        assert task.status == TaskStatus.TODO
