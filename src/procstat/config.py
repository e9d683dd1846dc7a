"""Runtime settings for procstat, read from the environment."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from procstat.records import DEFAULT_PROC_ROOT

PROC_ROOT_VAR = "PROCSTAT_PROC_ROOT"
LOG_LEVEL_VAR = "PROCSTAT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING
# Diagnostics for unreadable records are logged at ERROR and must always show
MAX_LOG_LEVEL = logging.ERROR


@dataclass(slots=True, frozen=True)
class Settings:
    """Immutable procstat settings."""

    proc_root: Path = DEFAULT_PROC_ROOT
    log_level: int = DEFAULT_LOG_LEVEL


def _parse_log_level(name: str | None) -> int:
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    # getLevelName() maps unknown names to the string "Level <name>"
    if not isinstance(level, int):
        return DEFAULT_LOG_LEVEL
    return min(level, MAX_LOG_LEVEL)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.
    """
    if environ is None:
        environ = os.environ

    proc_root = environ.get(PROC_ROOT_VAR)
    return Settings(
        proc_root=Path(proc_root) if proc_root else DEFAULT_PROC_ROOT,
        log_level=_parse_log_level(environ.get(LOG_LEVEL_VAR)),
    )
