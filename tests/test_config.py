import logging
from pathlib import Path

import pytest

from eta import config


def test_defaults(monkeypatch):
    for var in ("ETA_MAX_DEPTH", "ETA_LOG_LEVEL", "ETA_REPL_HOST", "ETA_REPL_PORT", "ETA_PRELUDE_PATH"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_max_depth() == 128
    assert config.get_log_level() == logging.WARNING
    assert config.get_repl_address() == ("127.0.0.1", 8765)
    assert config.get_prelude_path() is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("ETA_MAX_DEPTH", " 50 ")
    monkeypatch.setenv("ETA_LOG_LEVEL", "debug")
    monkeypatch.setenv("ETA_PRELUDE_PATH", "/tmp/prelude.eta")
    assert config.get_max_depth() == 50
    assert config.get_log_level() == logging.DEBUG
    assert config.get_prelude_path() == Path("/tmp/prelude.eta")


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("ETA_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_max_depth(monkeypatch, raw):
    monkeypatch.setenv("ETA_MAX_DEPTH", raw)
    with pytest.raises(ValueError):
        config.get_max_depth()
