#!/usr/bin/env python3
"""
Application Settings
====================
Defaults for the CLI, read from ``configs/app.yaml``.

``get_setting`` does a raw dotted-path lookup. The typed accessors below
check the values the CLI depends on and raise ConfigError naming the key,
so a bad app.yaml fails with a message instead of deep inside argparse.

Usage:
    from namesmith.settings import default_word_count, line_format

    count = default_word_count()        # 5
    line = line_format()                # "{romanized} /{phonetic}/"
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

DEFAULT_WORD_COUNT = 5
DEFAULT_PHONOLOGY = "english"
DEFAULT_LINE_FORMAT = "{romanized} /{phonetic}/"
DEFAULT_LOG_FORMAT = "%(message)s"
DEFAULT_LOG_DATE_FORMAT = "[%X]"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise ConfigError(f"Missing app config: {APP_CONFIG_PATH}")
    try:
        data = yaml.safe_load(APP_CONFIG_PATH.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {APP_CONFIG_PATH.name}: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{APP_CONFIG_PATH.name} must contain a mapping")
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def _typed_setting(path: str, default: Any, kind: type, description: str) -> Any:
    value = get_setting(path, default)
    # bool is an int subclass; "word_count: yes" is not a count
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ConfigError(f"{APP_CONFIG_PATH.name}: '{path}' must be {description}, got {value!r}")
    return value


# =============================================================================
# Typed Accessors
# =============================================================================

def default_word_count() -> int:
    """Words per batch when ``-n`` is not given."""
    count = _typed_setting('generation.word_count', DEFAULT_WORD_COUNT, int, "an integer")
    if count < 0:
        raise ConfigError(f"{APP_CONFIG_PATH.name}: 'generation.word_count' must be zero or more")
    return count


def default_phonology() -> str:
    """Phonology name or path used when ``-p`` is not given."""
    name = _typed_setting('generation.phonology', DEFAULT_PHONOLOGY, str, "a string")
    if not name.strip():
        raise ConfigError(f"{APP_CONFIG_PATH.name}: 'generation.phonology' must not be empty")
    return name


def line_format() -> str:
    """Format string for one output line (fields of GeneratedWord)."""
    return _typed_setting('output.line_format', DEFAULT_LINE_FORMAT, str, "a string")


def log_format() -> str:
    return _typed_setting('logging.format', DEFAULT_LOG_FORMAT, str, "a string")


def log_date_format() -> str:
    return _typed_setting('logging.date_format', DEFAULT_LOG_DATE_FORMAT, str, "a string")


__all__ = [
    "load_app_config",
    "get_setting",
    "default_word_count",
    "default_phonology",
    "line_format",
    "log_format",
    "log_date_format",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
