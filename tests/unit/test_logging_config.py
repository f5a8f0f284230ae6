"""Tests for logging configuration."""

import logging

import pytest

from catalog_feed.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_console_only_without_service_name():
    setup_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert root.level == logging.INFO
    assert logging.getLogger("aiohttp").level == logging.WARNING


def test_verbose_enables_debug():
    setup_logging(verbose=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert root.handlers[0].level == logging.DEBUG


def test_service_name_adds_file_handler(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_LOG_DIRECTORY", str(tmp_path / "logs"))

    setup_logging("catalog_feed")

    file_handlers = [handler for handler in logging.getLogger().handlers if isinstance(handler, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs" / "catalog_feed.log").exists()


def test_repeated_setup_does_not_stack_handlers():
    setup_logging()
    setup_logging()

    assert len(logging.getLogger().handlers) == 1


def test_verbose_from_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_VERBOSE", "true")

    setup_logging()

    assert logging.getLogger().level == logging.DEBUG


def test_log_append_keeps_previous_file(monkeypatch, tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    (log_dir / "catalog-feed.log").write_text("earlier run\n")
    monkeypatch.setenv("CATALOG_LOG_DIRECTORY", str(log_dir))
    monkeypatch.setenv("CATALOG_LOG_APPEND", "1")

    setup_logging("catalog-feed")

    file_handlers = [handler for handler in logging.getLogger().handlers if isinstance(handler, logging.FileHandler)]
    assert file_handlers[0].mode == "a"
    assert (log_dir / "catalog-feed.log").read_text().startswith("earlier run")
