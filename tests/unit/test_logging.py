"""Tests for structlog configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from cargomap.core.config import AppSettings
from cargomap.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output(capsys):
    configure_logging(AppSettings(log_format="json", log_level="DEBUG"))
    structlog.get_logger("cargomap.test").info("schema_inferred", assigned=3)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "schema_inferred"
    assert event["assigned"] == 3
    assert event["level"] == "info"
    assert "timestamp" in event


def test_level_filtering(capsys):
    configure_logging(AppSettings(log_format="json", log_level="WARNING"))
    structlog.get_logger("cargomap.test").info("hidden")
    assert capsys.readouterr().out == ""


def test_unknown_level_falls_back_to_info(capsys):
    configure_logging(AppSettings(log_format="json", log_level="CHATTY"))
    logger = structlog.get_logger("cargomap.test")
    logger.debug("hidden")
    logger.info("shown")
    out = capsys.readouterr().out
    assert "shown" in out
    assert "hidden" not in out
