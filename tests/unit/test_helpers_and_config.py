"""
Tests des utilitaires de dates, de la configuration et du logging.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from loguru import logger

from pointeuse.config import Settings
from pointeuse.logging_config import configure_logging
from pointeuse.utils.helpers import parse_datetime, to_utc_naive, utc_now


class TestDates:
    def test_utc_now_is_naive(self):
        assert utc_now().tzinfo is None

    def test_naive_datetime_is_kept(self):
        value = datetime(2024, 1, 1, 9)
        assert to_utc_naive(value) == value

    def test_aware_datetime_is_converted_to_utc(self):
        paris = timezone(timedelta(hours=1))
        value = datetime(2024, 1, 1, 10, tzinfo=paris)

        assert to_utc_naive(value) == datetime(2024, 1, 1, 9)

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2024-01-01T09:00", datetime(2024, 1, 1, 9)),
            ("2024-01-01T09:00:00Z", datetime(2024, 1, 1, 9)),
            ("2024-01-01T11:00:00+02:00", datetime(2024, 1, 1, 9)),
            (" 2024-01-01 ", datetime(2024, 1, 1)),
        ],
    )
    def test_parse_datetime(self, raw, expected):
        assert parse_datetime(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "demain", "2024-13-01T09:00"])
    def test_parse_datetime_rejects_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_datetime(raw)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("POINTEUSE_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.default_page_size == 20
        assert settings.max_page_size == 100
        assert settings.max_start_skew_minutes == 5
        assert settings.user_header == "X-User-Id"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("POINTEUSE_MAX_PAGE_SIZE", "50")
        monkeypatch.setenv("POINTEUSE_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.max_page_size == 50
        assert settings.log_level == "DEBUG"

    def test_log_file_expands_home(self):
        settings = Settings(_env_file=None, log_file="~/pointeuse.log")

        assert settings.log_file == Path.home() / "pointeuse.log"


class TestLogging:
    def test_writes_json_lines_with_user(self, tmp_path):
        log_file = tmp_path / "logs" / "pointeuse.log"
        configure_logging(log_level="DEBUG", log_file=log_file)

        with logger.contextualize(user_id="u1"):
            logger.info("Worklog demarre")
        logger.complete()
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "Worklog demarre" in content
        assert '"user_id": "u1"' in content
