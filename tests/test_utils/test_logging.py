"""Tests for niche_radar/utils/logging.py."""

from __future__ import annotations

import json
import logging

import pytest

from niche_radar.config import LoggingConfig
from niche_radar.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _read_lines(path) -> list[str]:
    for handler in logging.getLogger().handlers:
        handler.flush()
    return path.read_text(encoding="utf-8").splitlines()


class TestJsonFileLogging:
    def test_one_json_line_with_extras(self, tmp_path):
        log_file = tmp_path / "logs" / "radar.log"
        configure_logging(
            LoggingConfig(level="info", json_format=True, log_file=str(log_file))
        )

        logging.getLogger("niche_radar.test").info(
            "Scored %s", "corporate_ma", extra={"threat_score": 0.86, "_private": 1}
        )

        lines = _read_lines(log_file)
        assert len(lines) == 1
        payload = json.loads(lines[0])
        assert payload["level"] == "INFO"
        assert payload["logger"] == "niche_radar.test"
        assert payload["msg"] == "Scored corporate_ma"
        assert payload["threat_score"] == pytest.approx(0.86)
        assert "_private" not in payload
        assert "lineno" not in payload
        assert payload["ts"].endswith("Z")

    def test_records_below_level_are_dropped(self, tmp_path):
        log_file = tmp_path / "radar.log"
        configure_logging(
            LoggingConfig(level="WARNING", json_format=True, log_file=str(log_file))
        )
        log = logging.getLogger("niche_radar.test")
        log.info("quiet")
        log.warning("loud")

        lines = _read_lines(log_file)
        assert [json.loads(line)["msg"] for line in lines] == ["loud"]


class TestTextLogging:
    def test_text_format_in_file(self, tmp_path):
        log_file = tmp_path / "radar.log"
        configure_logging(LoggingConfig(level="DEBUG", log_file=str(log_file)))

        logging.getLogger("niche_radar.test").debug("Session reset")

        (line,) = _read_lines(log_file)
        assert "[DEBUG] niche_radar.test: Session reset" in line
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)
