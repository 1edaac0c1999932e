"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from finance_tracker.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file under logs/<subdir>."""
    monkeypatch.delenv("FINANCE_LOG_DIR", raising=False)
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = logger_module.LoggerBuilder()
    ledger_logger = (
        builder.name("finance_tracker.test_ledger")
        .subdir("ledger")
        .prefix("ledger_logs")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert ledger_logger.level == logging.WARNING
    assert ledger_logger.propagate is False
    assert len(ledger_logger.handlers) == 1
    expected_path = tmp_path / "logs" / "ledger" / "20240315_ledger_logs.log"
    assert ledger_logger.handlers[0].baseFilename == str(expected_path)
    assert builder.build() is ledger_logger

    for handler in list(ledger_logger.handlers):
        handler.close()
        ledger_logger.removeHandler(handler)


def test_builder_uses_injected_handler_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honored."""
    monkeypatch.delenv("FINANCE_LOG_DIR", raising=False)
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen_paths = []

    def _file_factory(path, formatter):
        seen_paths.append(path)
        assert formatter is fmt
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("finance_tracker.test_factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen_paths[0].parent == tmp_path / "logs"

    for handler in list(built.handlers):
        built.removeHandler(handler)


def test_log_dir_env_overrides_project_root(tmp_path, monkeypatch):
    """FINANCE_LOG_DIR should replace the project-relative logs folder."""
    custom_root = tmp_path / "custom"
    monkeypatch.setenv("FINANCE_LOG_DIR", str(custom_root))
    project_root = MagicMock(side_effect=AssertionError("project root used"))
    monkeypatch.setattr(logger_module, "get_project_root", project_root)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240401"),
    )

    usage_logger = (
        logger_module.LoggerBuilder()
        .name("finance_tracker.test_log_dir_env")
        .subdir("usage")
        .prefix("usage_logs")
        .console(False)
        .build()
    )

    expected_path = custom_root / "usage" / "20240401_usage_logs.log"
    assert usage_logger.handlers[0].baseFilename == str(expected_path)
    assert expected_path.parent.is_dir()
    project_root.assert_not_called()

    for handler in list(usage_logger.handlers):
        handler.close()
        usage_logger.removeHandler(handler)


def test_empty_log_dir_env_falls_back_to_project_root(tmp_path, monkeypatch):
    """An empty FINANCE_LOG_DIR is ignored."""
    monkeypatch.setenv("FINANCE_LOG_DIR", "")
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)

    assert logger_module.get_log_root() == tmp_path / "logs"


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt

    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger info/warning/error/etc. should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("ledger")
    logger.info("posted")
    logger.warning("overdraft")
    logger.error("rolled back")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("posted")
    fake_logger.warning.assert_called_with("overdraft")
    fake_logger.error.assert_called_with("rolled back")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return their own singletons."""
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert isinstance(app_logger, logger_module.AppLogger)
    assert isinstance(usage_logger, logger_module.UsageLogger)
