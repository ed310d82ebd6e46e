"""Unit tests for the logging setup."""

import logging

import pytest

from app.config import get_settings
from app.infrastructure.logging.log_config import _parse_level, setup_logging


@pytest.fixture
def fresh_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_SQL", "ERROR")
    monkeypatch.setenv("LOG_LEVEL_SERVICES", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_setup_logging_applies_per_family_levels(fresh_settings):
    setup_logging()
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("app.application.services").level == logging.DEBUG


def test_parse_level_falls_back_to_info():
    assert _parse_level("warning") == logging.WARNING
    assert _parse_level("chatty") == logging.INFO
