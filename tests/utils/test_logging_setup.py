import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from newsscraper.utils.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_output_goes_to_stderr(capsys):
    configure_logging(level="debug", output="stdout")

    get_logger("newsscraper.test").debug("candidate skipped")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DEBUG | newsscraper.test | candidate skipped" in captured.err
    assert logging.getLogger().level == logging.DEBUG


def test_file_output_uses_rotating_handler_and_json(tmp_path):
    log_file = tmp_path / "nested" / "scraper.log"
    configure_logging(level="INFO", output="file", file_path=str(log_file), log_format="json")

    get_logger("newsscraper.test").info("fetched page")
    for handler in logging.getLogger().handlers:
        handler.flush()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1 and isinstance(handlers[0], RotatingFileHandler)
    record = json.loads(log_file.read_text(encoding="utf-8").strip())
    assert record["level"] == "INFO"
    assert record["logger"] == "newsscraper.test"
    assert record["message"] == "fetched page"


def test_environment_supplies_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_OUTPUT", "both")
    monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "env.log"))

    configure_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 2
