"""Runtime tunables for share generation and diagnostics.

Values are read once from the environment so that the command line tool and
library users share the same limits without code changes. Malformed values
fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if not value:
        return default
    value = value.strip().upper()
    if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return default
    return value


@dataclass(frozen=True)
class SharingPolicy:
    """Holds limits and logging switches for split/combine."""

    max_shares: int = 255
    trace_points: bool = False
    log_level: str = "WARNING"


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    return SharingPolicy(
        max_shares=_load_int("SSSA_MAX_SHARES", 255),
        trace_points=_load_bool("SSSA_TRACE_POINTS", False),
        log_level=_load_level("SSSA_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
