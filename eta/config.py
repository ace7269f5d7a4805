from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_MAX_DEPTH = 128
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_depth() -> int:
    depth = int_from_env('ETA_MAX_DEPTH', _DEFAULT_MAX_DEPTH)
    if depth < 1:
        raise ValueError(f"ETA_MAX_DEPTH must be positive, got {depth}")
    return depth


def get_log_level() -> int:
    name = os.environ.get('ETA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('ETA_REPL_HOST', _DEFAULT_REPL_HOST)
    return host, int_from_env('ETA_REPL_PORT', _DEFAULT_REPL_PORT)


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('ETA_PRELUDE_PATH')
    if not raw:
        return None
    return Path(raw.strip())
