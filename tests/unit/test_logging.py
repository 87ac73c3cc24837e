"""
Unit tests for logging configuration
"""

import logging
import pytest
from core.config import settings
from core.logging import APP_LOGGERS, NOISY_LOGGERS, resolve_level, setup_logging


@pytest.fixture
def restore_levels():
    names = APP_LOGGERS + NOISY_LOGGERS + ("__main__",)
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestResolveLevel:

    def test_named_level(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert resolve_level("chatty") == logging.INFO

    def test_defaults_to_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_LEVEL", "ERROR")

        assert resolve_level() == logging.ERROR


class TestSetupLogging:
    """Test dashboard and library logger levels"""

    def test_dashboard_loggers_follow_level(self, restore_levels):
        applied = setup_logging("WARNING")

        # Assertions
        assert applied == logging.WARNING
        for name in APP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert logging.getLogger("services.accounts").getEffectiveLevel() == logging.WARNING

    def test_libraries_stay_quiet(self, restore_levels):
        setup_logging("INFO")

        assert logging.getLogger("analytics").level == logging.INFO
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_debug_opens_library_logs(self, restore_levels):
        setup_logging("DEBUG")

        assert logging.getLogger("storage").level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
