"""
Integration tests: services, aggregation and export over one store
"""

import pytest
from analytics.aggregation import DashboardAggregator
from analytics.export import export_csv
from core.exceptions import AccessDeniedError
from models.base import Channel, Role
from schemas.dashboard import RecordFilter
from schemas.entities import MarketingRecordCreate
from services.access import capabilities_for
from services.auth import login
from services.records import RecordService
from storage.repositories import build_repositories


def entry(day, category, channel, **metrics):
    return MarketingRecordCreate(date=day, category=category, channel=channel, metrics=metrics)


def test_fresh_store_admin_login(repositories):
    """Empty store seeds the fixed accounts and the admin can log in"""
    users = repositories.users.get_all()
    assert len(users) == 3

    user = login(repositories, "admin", "password")

    assert user.role == Role.ADMIN


def test_same_day_revenue_is_bucketed(repositories):
    admin = login(repositories, "admin", "password")
    service = RecordService(repositories.records)
    capability = capabilities_for(admin.role)

    service.save_record(admin, capability, entry("2024-03-01", "Organik", "Facebook", Revenue="100000"))
    service.save_record(admin, capability, entry("2024-03-01", "Organik", "Facebook", Revenue="50000"))

    snapshot = DashboardAggregator().snapshot(repositories.records.get_all())

    # Assertions
    assert len(snapshot.time_series) == 1
    assert snapshot.time_series[0].revenue == 150000
    assert snapshot.channel_distribution == {Channel.FACEBOOK: 2}


def test_non_numeric_spend_counts_as_zero(repositories):
    admin = login(repositories, "admin", "password")
    RecordService(repositories.records).save_record(
        admin,
        capabilities_for(admin.role),
        entry("2024-03-02", "Paid Ads", "Meta Ads", Spend="abc")
    )

    snapshot = DashboardAggregator().snapshot(repositories.records.get_all())

    assert snapshot.summary.total_spend == 0
    assert snapshot.summary.roas is None


def test_specialists_fill_their_own_categories(repositories):
    """Each specialist logs under their category; the dashboard splits them back out"""
    service = RecordService(repositories.records)

    ads = login(repositories, "ads_spesialis", "password")
    service.save_record(ads, capabilities_for(ads.role), entry("2024-04-01", "Paid Ads", "Google Ads", Spend="1000", Revenue="4000"))
    with pytest.raises(AccessDeniedError):
        service.save_record(ads, capabilities_for(ads.role), entry("2024-04-01", "Organik", "Youtube"))

    socmed = login(repositories, "socmed_spesialis", "password")
    service.save_record(socmed, capabilities_for(socmed.role), entry("2024-04-02", "Organik", "Tiktok", Budget="500", Revenue="250"))

    records = repositories.records.get_all()
    paid = DashboardAggregator(RecordFilter(category="Paid Ads")).snapshot(records)
    organic = DashboardAggregator(RecordFilter(category="Organik")).snapshot(records)

    assert paid.summary.record_count == 1
    assert paid.summary.roas == 4.0
    assert organic.summary.total_spend == 500
    assert organic.summary.roas == 0.5
    assert {r.user_id for r in records} == {"2", "3"}


def test_state_survives_new_repositories(store, repositories):
    """A second set of repositories over the same store sees the same data"""
    admin = login(repositories, "admin", "password")
    RecordService(repositories.records).save_record(
        admin,
        capabilities_for(admin.role),
        entry("2024-05-01", "Organik", "Website", Revenue="900", Leads="3")
    )

    reopened = build_repositories(store)

    assert reopened.session.get_current().username == "admin"
    assert len(reopened.records.get_all()) == 1
    csv_lines = export_csv(reopened.records.get_all()).splitlines()
    assert csv_lines[1].endswith(",2024-05-01,Organik,Website,Awareness,0,900,3")
