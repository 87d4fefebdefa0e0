from __future__ import annotations

import io
import json
import logging

import pytest

from filemanager import main as main_module
from filemanager.cli import parse_args
from filemanager.config import get_log_file_from_env, get_log_level_from_env
from filemanager.logging_conf import JsonFormatter, setup_logging


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level_from_env() == "WARNING"


def test_log_level_from_env_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert get_log_level_from_env() == "DEBUG"


def test_log_level_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "loud")
    with pytest.raises(ValueError):
        get_log_level_from_env()


def test_log_file_blank_means_stderr(monkeypatch):
    monkeypatch.setenv("FILEMANAGER_LOG_FILE", "  ")
    assert get_log_file_from_env() is None


def test_cli_flags_override_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    args = parse_args(["--log-level", "info", "--log-file", "fm.log"])
    assert args.log_level == "INFO"
    assert args.log_file == "fm.log"


def test_cli_defaults_come_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("FILEMANAGER_LOG_FILE", "out.log")
    args = parse_args([])
    assert (args.log_level, args.log_file) == ("ERROR", "out.log")


def test_json_formatter_merges_extras():
    record = logging.LogRecord("service.fs", logging.INFO, __file__, 1, "fs.list", None, None)
    record.event = "list"
    record.path = "/tmp/t"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "fs.list"
    assert payload["logger"] == "service.fs"
    assert payload["event"] == "list"
    assert payload["path"] == "/tmp/t"
    assert "lineno" not in payload


def test_setup_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    setup_logging("INFO", log_file=None)
    setup_logging("DEBUG", log_file=None)
    assert len(root.handlers) == 1
    root.handlers[0].close()


def test_main_exits_zero_after_confirmed_exit(monkeypatch):
    answers = iter(["9", "y"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    monkeypatch.setattr("sys.stdout", io.StringIO())
    monkeypatch.setattr(main_module, "setup_logging", lambda *a, **k: None)
    with pytest.raises(SystemExit) as exc:
        main_module.main([])
    assert exc.value.code == 0
