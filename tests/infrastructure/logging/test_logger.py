"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True)
def _reset_singletons():
    for cls in (
        logger_module.Logger,
        logger_module.AppLogger,
        logger_module.UsageLogger,
    ):
        cls._instance = None
    yield
    for cls in (
        logger_module.Logger,
        logger_module.AppLogger,
        logger_module.UsageLogger,
    ):
        cls._instance = None


def test_builder_writes_dated_file_under_subdir(tmp_path, monkeypatch):
    """Built loggers log to logs/<subdir>/<date>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("wealth_dashboard.test_cli")
        .subdir("cli")
        .prefix("cli_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected_path = tmp_path / "logs" / "cli" / "20240315_cli_logs.log"
    assert built.handlers[0].baseFilename == str(expected_path)
    assert builder.build() is built
    assert len(built.handlers) == 1

    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Injected factories replace the default handlers and formatter."""
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
        .name("wealth_dashboard.test_factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen_paths[0].parent == tmp_path / "logs" / "app"

    for handler in list(built.handlers):
        built.removeHandler(handler)


def test_default_handlers_log_at_info(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "wealth.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_forwards_every_level(monkeypatch):
    """Logger methods should call the wrapped logging.Logger."""
    wrapped = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder, "build", lambda self: wrapped
    )

    wrapper = logger_module.Logger("wealth_dashboard.wrapper")
    for level in ("info", "warning", "error", "debug", "critical"):
        getattr(wrapper, level)(f"{level} message")
        getattr(wrapped, level).assert_called_once_with(f"{level} message")

    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built_names = []

    def _fake_build(self):
        built_names.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == [
        ("wealth_dashboard.app", "app", "app_logs"),
        ("wealth_dashboard.usage", "usage", "usage_logs"),
    ]
