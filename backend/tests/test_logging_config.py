"""
Tests for logging configuration
"""
import json
import logging

from app.core.logging_config import (ContextualFormatter, LoggingConfig,
                                     SensitiveDataFilter)


def _record(msg, *args, **extra):
    record = logging.LogRecord("app.test", logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_sensitive_data_masked():
    record = _record("Calling upstream with Bearer abc.def.ghi and token=xyz")

    SensitiveDataFilter().filter(record)

    assert "abc.def.ghi" not in record.msg
    assert "xyz" not in record.msg


def test_sensitive_data_filter_disabled():
    record = _record("password=hunter2")

    SensitiveDataFilter(enabled=False).filter(record)

    assert record.msg == "password=hunter2"


def test_sensitive_data_masked_in_args():
    record = _record("header %s", "Authorization: secret-value")

    SensitiveDataFilter().filter(record)

    assert "secret-value" not in record.getMessage()


def test_formatter_includes_context_and_extra():
    LoggingConfig.set_context(request_id="req-1")
    try:
        output = ContextualFormatter().format(_record("Metadata JSON resolved", file_name="My_Report"))
    finally:
        LoggingConfig.clear_context()

    payload = json.loads(output)
    assert payload["message"] == "Metadata JSON resolved"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "req-1"
    assert payload["file_name"] == "My_Report"


def test_clear_context():
    LoggingConfig.set_context(request_id="req-2")
    LoggingConfig.clear_context()

    payload = json.loads(ContextualFormatter().format(_record("after clear")))

    assert "request_id" not in payload


def test_metrics_count_levels():
    LoggingConfig.reset_metrics()
    logger = LoggingConfig.get_logger("app.tests.metrics")

    logger.warning("first")
    logger.error("second")

    metrics = LoggingConfig.get_metrics()
    assert metrics["WARNING"] == 1
    assert metrics["ERROR"] == 1


def test_configure_applies_module_levels(monkeypatch):
    monkeypatch.setattr(LoggingConfig, "_configured", False)

    LoggingConfig.configure(module_levels={"app.tests.levels": "DEBUG"})

    assert logging.getLogger("app.tests.levels").level == logging.DEBUG
    assert LoggingConfig._configured is True
