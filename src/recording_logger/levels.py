"""
Standard severity names and level map construction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from recording_logger.errors import LevelMapError

_log = logging.getLogger(__name__)

#: External level value: whatever the subject-under-test passes to ``log()``.
Level = str | int


class LogLevel:
    """String constants for the eight standard severities."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"


# Most to least severe
STANDARD_LEVELS: tuple[str, ...] = (
    LogLevel.EMERGENCY,
    LogLevel.ALERT,
    LogLevel.CRITICAL,
    LogLevel.ERROR,
    LogLevel.WARNING,
    LogLevel.NOTICE,
    LogLevel.INFO,
    LogLevel.DEBUG,
)


def build_level_map(overrides: Mapping[str, Level] | None = None) -> Mapping[str, Level]:
    """
    Build a read-only level map.

    Starts from the identity mapping (each standard name maps to itself) and
    applies ``overrides`` on top, so a partial override only remaps the names
    it lists.

    Args:
        overrides: Standard severity name (case-insensitive) to the level value
            used by the code under test. Values must be ``str`` or ``int``.

    Returns:
        A read-only mapping with an entry for every standard severity.

    Raises:
        LevelMapError: If a key is not a standard severity name or a value is
            not a string or integer.
    """
    level_map: dict[str, Level] = {name: name for name in STANDARD_LEVELS}
    if not overrides:
        return MappingProxyType(level_map)

    for key, value in overrides.items():
        name = key.lower() if isinstance(key, str) else key
        if name not in level_map:
            raise LevelMapError(
                f"Unknown severity name in level map: {key!r} "
                f"(expected one of {list(STANDARD_LEVELS)})"
            )
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise LevelMapError(
                f"Level value for {key!r} must be str or int, got {type(value).__name__}"
            )
        level_map[name] = value

    _log.debug("Level map overrides applied: %s", dict(overrides))
    return MappingProxyType(level_map)
