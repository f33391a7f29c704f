import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from fli.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_cli_mode_uses_rich_handler(monkeypatch):
    monkeypatch.delenv("FLI_LOG_MODE", raising=False)
    setup_logging()
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_json_mode_from_environment(monkeypatch):
    monkeypatch.setenv("FLI_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_file_handler_only_when_requested(tmp_path):
    log_file = tmp_path / "fli.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert isinstance(file_handlers[0].formatter, JsonFormatter)
    logging.getLogger("fli").warning("hello")
    file_handlers[0].flush()
    assert "hello" in log_file.read_text()


def test_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
