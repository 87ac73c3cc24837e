"""
Pytest configuration and fixtures
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from core.config import settings
from core.database import init_db
from schemas.entities import MarketingRecord
from storage.kv import SQLKeyValueStore
from storage.repositories import build_repositories

# In-memory SQLite shared by every session of one test
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine"""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    init_db(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return sessionmaker(
        bind=test_engine,
        class_=Session,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest.fixture
def store(session_factory):
    return SQLKeyValueStore(session_factory)


@pytest.fixture
def repositories(store):
    return build_repositories(store)


@pytest.fixture
def strict_metric_keys(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_METRIC_KEYS", True)


@pytest.fixture
def mock_records():
    """Mixed organic and paid records over three days"""
    return [
        MarketingRecord(
            id="rec_001",
            user_id="3",
            date="2024-01-15",
            category="Organik",
            channel="Facebook",
            objective="Awareness",
            metrics={"Budget": "50000", "Revenue": "100000", "Leads": "4", "Jangkauan": "1200"}
        ),
        MarketingRecord(
            id="rec_002",
            user_id="2",
            date="2024-01-14",
            category="Paid Ads",
            channel="Meta Ads",
            objective="Conversion",
            metrics={"Spend": "200000", "Budget": "999", "Revenue": "600000", "Leads": "10", "Jangkauan": "8000"}
        ),
        MarketingRecord(
            id="rec_003",
            user_id="2",
            date="2024-01-15",
            category="Paid Ads",
            channel="Google Ads",
            objective="Consideration",
            metrics={"Spend": "75000.5", "Revenue": "abc", "Leads": ""}
        ),
        MarketingRecord(
            id="rec_004",
            user_id="3",
            date="2024-01-16",
            category="Organik",
            channel="Instagram",
            objective="Awareness",
            metrics={"Jangkauan": "3000", "Noted": "giveaway"}
        ),
    ]
