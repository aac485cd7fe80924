"""Test settings and logging setup."""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from ripple import Contact, Root, insert_contact
from ripple.config import Settings, get_settings
from ripple.demos import CounterApp
from ripple.log import configure_logging, get_logger


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.log_json is False
        assert settings.max_render_passes == 25
        assert (settings.window_width, settings.window_height) == (1024, 768)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RIPPLE_LOG_LEVEL", "debug")
        monkeypatch.setenv("RIPPLE_LOG_JSON", "true")
        monkeypatch.setenv("RIPPLE_WINDOW_WIDTH", "1920")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.window_width == 1920

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("RIPPLE_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()

    def test_zero_render_passes_rejected(self, monkeypatch):
        monkeypatch.setenv("RIPPLE_MAX_RENDER_PASSES", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_output(self, capsys):
        configure_logging("INFO", format_json=True, cache_loggers=False)

        get_logger("ripple.test").info("hello", answer=42)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert record["logger"] == "ripple.test"

    def test_level_filters(self, capsys):
        configure_logging("WARNING", cache_loggers=False)

        get_logger("ripple.test").info("quiet")
        get_logger("ripple.test").warning("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_loggers_are_stdlib_backed(self):
        logger = get_logger("ripple.test")

        assert isinstance(logger.bind(), structlog.stdlib.BoundLogger)


class TestUnconfiguredLogging:
    """Library use without configure_logging() prints nothing."""

    def test_library_calls_write_nothing_to_stdout(self, capsys):
        root = Root(CounterApp)
        root.mount()
        root.dispatch("click")
        root.unmount()
        insert_contact((), Contact(first_name="Ada", last_name="Lovelace", phone="1"))

        assert capsys.readouterr().out == ""

    def test_ripple_logger_has_null_handler(self):
        handlers = logging.getLogger("ripple").handlers

        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
