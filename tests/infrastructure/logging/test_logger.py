"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from household_finance.infrastructure.logging import logger as logger_module


def _freeze_logs(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20260101"),
    )


def test_builder_writes_into_dated_log_file(tmp_path, monkeypatch):
    """Built loggers log under logs/<subdir>/<date>_<prefix>.log."""
    _freeze_logs(monkeypatch, tmp_path)

    builder = (
        logger_module.LoggerBuilder()
        .name("household_finance.tests.builder")
        .subdir("summary")
        .prefix("summary_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    handler = built.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "summary" / "20260101_summary_logs.log"
    assert handler.baseFilename == str(expected)
    assert builder.build() is built
    handler.close()


def test_builder_adds_console_handler_when_enabled(tmp_path, monkeypatch):
    _freeze_logs(monkeypatch, tmp_path)
    console_handler = MagicMock(spec=logging.Handler)
    console_handler.level = logging.INFO

    built = (
        logger_module.LoggerBuilder()
        .name("household_finance.tests.console")
        .console(True)
        .console_handler(lambda fmt: console_handler)
        .build()
    )

    assert console_handler in built.handlers
    assert len(built.handlers) == 2
    built.handlers[0].close()


def test_default_handlers_log_info_with_shared_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_and_is_singleton(monkeypatch):
    """Logger subclasses share one wrapped logger per class."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    app_logger.info("loaded")
    app_logger.warning("Missing FX rate for EUR to USD")
    app_logger.error("failed")

    fake_logger.info.assert_called_once_with("loaded")
    fake_logger.warning.assert_called_once_with(
        "Missing FX rate for EUR to USD"
    )
    fake_logger.error.assert_called_once_with("failed")
    assert logger_module.get_app_logger() is app_logger


def test_usage_logger_uses_its_own_directory(monkeypatch):
    captured = {}

    def _fake_build(self):
        captured["subdir"] = self._subdir
        captured["prefix"] = self._prefix
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage_logger = logger_module.get_usage_logger()

    assert captured == {"subdir": "usage", "prefix": "usage_logs"}
    assert usage_logger is not logger_module.get_app_logger()
