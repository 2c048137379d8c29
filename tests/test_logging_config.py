"""Tests for logging configuration and formatters."""

import json
import logging

import pytest

from tutormatch.config import load_config
from tutormatch.logging import ComponentLoggerAdapter, get_logger
from tutormatch.logging.config import (
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
    configure_logging_from_config,
)
from tutormatch.logging.context import log_context


@pytest.fixture
def logger():
    """Create a test logger for building records."""
    test_logger = logging.getLogger("test_logger")
    test_logger.setLevel(logging.DEBUG)
    test_logger.handlers.clear()

    yield test_logger

    test_logger.handlers.clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after configure_logging()."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield root_logger

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def make_record(logger, message="Test message", **extra):
    return logger.makeRecord("test", logging.INFO, "test.py", 1, message, (), None, extra=extra or None)


def key_value_formatter():
    return KeyValueFormatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def test_json_formatter_basic(logger):
    """JSONFormatter produces valid JSON with mandatory fields."""
    log_obj = json.loads(JSONFormatter().format(make_record(logger)))

    assert log_obj["level"] == "INFO"
    assert log_obj["logger"] == "test"
    assert log_obj["message"] == "Test message"
    assert "timestamp" in log_obj


def test_json_formatter_with_extra_fields(logger):
    record = make_record(logger, event="matching.rank.completed", job_count=42, top_score=None)

    log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["event"] == "matching.rank.completed"
    assert log_obj["job_count"] == 42
    assert log_obj["top_score"] is None


def test_json_formatter_stringifies_unknown_types(logger):
    record = make_record(logger, reasons=("a", "b"), path=object())

    log_obj = json.loads(JSONFormatter().format(record))

    assert isinstance(log_obj["reasons"], str)
    assert isinstance(log_obj["path"], str)


def test_json_formatter_no_duplicate_fields(logger):
    log_obj = json.loads(JSONFormatter().format(make_record(logger, event="test.event")))

    assert "name" not in log_obj
    assert "msg" not in log_obj
    assert "event" in log_obj


def test_timestamp_format_in_json(logger):
    timestamp = json.loads(JSONFormatter().format(make_record(logger)))["timestamp"]

    assert timestamp.endswith("Z")
    assert "T" in timestamp
    assert len(timestamp) == 24  # 2025-11-04T10:30:00.123Z


def test_contextual_filter_adds_static_fields(logger):
    record = make_record(logger)

    ContextualFilter(service="test-service", environment="test").filter(record)

    assert record.service == "test-service"
    assert record.environment == "test"


def test_contextual_filter_defaults(logger):
    record = make_record(logger)

    ContextualFilter().filter(record)

    assert record.service == "tutormatch"
    assert record.environment == "local"


def test_contextual_filter_adds_context_fields(logger):
    with log_context(tutor_id="tutor-1", job_id="job-9"):
        record = make_record(logger)
        ContextualFilter().filter(record)

    assert record.tutor_id == "tutor-1"
    assert record.job_id == "job-9"


def test_explicit_extra_wins_over_context(logger):
    with log_context(tutor_id="from-context"):
        record = make_record(logger, tutor_id="from-call")
        ContextualFilter().filter(record)

    assert record.tutor_id == "from-call"


def test_json_formatter_with_context(logger):
    """Full pipeline: context + filter + JSON formatter."""
    with log_context(tutor_id="tutor-1"):
        record = make_record(logger, "Alert plan completed", event="alerts.plan.completed")
        ContextualFilter(service="tutormatch", environment="test").filter(record)
        log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["message"] == "Alert plan completed"
    assert log_obj["event"] == "alerts.plan.completed"
    assert log_obj["service"] == "tutormatch"
    assert log_obj["environment"] == "test"
    assert log_obj["tutor_id"] == "tutor-1"


def test_key_value_formatter_basic(logger):
    output = key_value_formatter().format(make_record(logger))

    assert "[INFO]" in output
    assert "test: Test message" in output


def test_key_value_formatter_with_extras(logger):
    record = make_record(logger, event="test.event", count=42, flag=True, reason="no match", top_score=None)

    output = key_value_formatter().format(record)

    assert "event=test.event" in output
    assert "count=42" in output
    assert "flag=true" in output
    assert 'reason="no match"' in output
    assert "top_score=null" in output


def test_key_value_formatter_skips_static_fields(logger):
    record = make_record(logger)
    ContextualFilter(environment="test").filter(record)

    output = key_value_formatter().format(record)

    assert "service=" not in output
    assert "environment=" not in output


def test_get_logger_with_component(caplog):
    adapter = get_logger("tutormatch.test", component="matching")
    assert isinstance(adapter, ComponentLoggerAdapter)

    with caplog.at_level(logging.INFO, logger="tutormatch.test"):
        adapter.info("Ranked", extra={"event": "matching.rank.completed"})

    assert caplog.records[-1].component == "matching"
    assert caplog.records[-1].event == "matching.rank.completed"


def test_get_logger_call_site_component_wins(caplog):
    adapter = get_logger("tutormatch.test", component="matching")

    with caplog.at_level(logging.INFO, logger="tutormatch.test"):
        adapter.info("Rendered", extra={"component": "alerts"})

    assert caplog.records[-1].component == "alerts"


def test_get_logger_without_component():
    assert isinstance(get_logger("tutormatch.test"), logging.Logger)


def test_configure_logging_invalid_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging(level="INVALID")


def test_configure_logging_invalid_format():
    with pytest.raises(ValueError, match="Invalid log format"):
        configure_logging(format_type="invalid")


def test_configure_logging_json_format(restore_root_logger):
    configure_logging(level="debug", format_type="json", environment="test")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    handler = restore_root_logger.handlers[0]
    assert isinstance(handler.formatter, JSONFormatter)
    assert any(isinstance(f, ContextualFilter) and f.environment == "test" for f in handler.filters)


def test_configure_logging_key_value_format(restore_root_logger):
    configure_logging(level="WARNING", format_type="key-value")

    assert restore_root_logger.level == logging.WARNING
    assert isinstance(restore_root_logger.handlers[0].formatter, KeyValueFormatter)


def test_configure_logging_announces_itself(restore_root_logger, capsys):
    configure_logging(level="INFO", format_type="json", environment="test")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    log_obj = json.loads(lines[-1])

    assert log_obj["event"] == "logging.configured"
    assert log_obj["log_level"] == "INFO"
    assert log_obj["log_format"] == "json"
    assert log_obj["environment"] == "test"


class TestConfigureLoggingFromConfig:
    """Applying the loaded configuration to the root logger."""

    def test_yaml_settings_used_without_overrides(self, clean_env, restore_root_logger):
        config_file = clean_env / "config.yaml"
        config_file.write_text("logging:\n  level: WARNING\n  format: json\n")
        app_config, env_config = load_config(config_file)

        configure_logging_from_config(app_config, env_config)

        assert restore_root_logger.level == logging.WARNING
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_environment_overrides_yaml(self, clean_env, monkeypatch, restore_root_logger, capsys):
        config_file = clean_env / "config.yaml"
        config_file.write_text("logging:\n  level: WARNING\n  format: key-value\n")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("APP_ENV", "staging")
        app_config, env_config = load_config(config_file)

        configure_logging_from_config(app_config, env_config)

        assert restore_root_logger.level == logging.DEBUG
        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        log_obj = json.loads(lines[-1])
        assert log_obj["event"] == "logging.configured"
        assert log_obj["log_level"] == "DEBUG"
        assert log_obj["environment"] == "staging"

    def test_environment_stamped_on_records(self, clean_env, monkeypatch, restore_root_logger, capsys):
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("LOG_FORMAT", "json")
        app_config, env_config = load_config()
        configure_logging_from_config(app_config, env_config)
        capsys.readouterr()

        logging.getLogger("tutormatch.test").info("Ranked", extra={"event": "matching.rank.completed"})

        log_obj = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert log_obj["environment"] == "production"
        assert log_obj["service"] == "tutormatch"
        assert log_obj["event"] == "matching.rank.completed"
