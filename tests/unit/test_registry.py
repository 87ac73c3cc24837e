"""
Unit tests for the channel/category schema registry
"""

from analytics.registry import (
    CHANNEL_METRICS,
    CATEGORY_CHANNELS,
    metric_fields_for,
    channels_for,
    category_of,
    is_text_metric,
    unknown_metric_keys,
)
from models.base import Category, Channel, MetricField


class TestCategoryChannels:
    """Test the category → channel partition"""

    def test_categories_partition_all_channels(self):
        """Every channel belongs to exactly one category"""
        seen = []
        for category in Category:
            seen.extend(channels_for(category))

        assert sorted(seen) == sorted(Channel)
        assert len(seen) == len(set(seen))

    def test_organic_and_paid_channels(self):
        assert channels_for(Category.ORGANIC) == (
            Channel.FACEBOOK, Channel.INSTAGRAM, Channel.TIKTOK, Channel.YOUTUBE, Channel.WEBSITE,
        )
        assert channels_for("Paid Ads") == (Channel.META_ADS, Channel.GOOGLE_ADS, Channel.TIKTOK_ADS)

    def test_category_of(self):
        assert category_of(Channel.TIKTOK) == Category.ORGANIC
        assert category_of("Tiktok Ads") == Category.PAID_ADS

    def test_every_category_is_configured(self):
        assert set(CATEGORY_CHANNELS) == set(Category)


class TestChannelMetrics:
    """Test metric field lookup per channel"""

    def test_meta_ads_fields_in_form_order(self):
        fields = metric_fields_for(Channel.META_ADS)

        assert fields[0] == "Tanggal Mulai"
        assert fields[1] == "Tanggal Berakhir"
        assert fields[2] == "Spend"
        assert fields[-1] == "Noted"
        assert len(fields) == 15

    def test_string_channel_lookup(self):
        assert metric_fields_for("Website") == [
            "Tanggal Mulai", "Tanggal Berakhir", "Sessions", "Users", "Pageviews",
            "Bounce Rate", "Leads", "Closing", "Revenue", "Noted",
        ]

    def test_unknown_channel_has_empty_schema(self):
        assert metric_fields_for("Snapchat") == []

    def test_organic_channels_track_budget_not_spend(self):
        for channel in channels_for(Category.ORGANIC):
            assert "Spend" not in metric_fields_for(channel)

        assert "Budget" in metric_fields_for(Channel.FACEBOOK)

    def test_every_metric_field_is_used(self):
        used = {field for fields in CHANNEL_METRICS.values() for field in fields}
        assert used == set(MetricField)

    def test_text_metrics(self):
        assert is_text_metric("Noted")
        assert is_text_metric("Tanggal Mulai")
        assert not is_text_metric("Revenue")

    def test_unknown_metric_keys(self):
        assert unknown_metric_keys(Channel.FACEBOOK, ["Budget", "Spend", "Revenue"]) == ["Spend"]
        assert unknown_metric_keys(Channel.META_ADS, ["Spend"]) == []
