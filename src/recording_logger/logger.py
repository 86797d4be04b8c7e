"""
Core RecordingLogger class.

Captures every ``log()`` call in memory and answers assertion queries
about what was logged, at which level and with which context.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from recording_logger.errors import UnknownMethodError
from recording_logger.levels import STANDARD_LEVELS, Level, LogLevel, build_level_map
from recording_logger.record import LogRecord
from recording_logger.store import RecordStore

_log = logging.getLogger(__name__)

Predicate = Callable[[LogRecord, int], Any]

# Suffixes of the per-level convenience methods, e.g. has_warning_that_contains
_CONVENIENCE_SUFFIXES = ("", "_records", "_that_contains", "_that_matches", "_that_passes")

_CONVENIENCE_NAME = re.compile(
    r"(?P<prefix>.*?)_(?P<level>" + "|".join(STANDARD_LEVELS) + r")(?P<suffix>.*)",
    re.IGNORECASE,
)


def _generic_method_name(prefix: str, suffix: str) -> str:
    """Map a convenience name's prefix and suffix to the generic query name."""
    if suffix == "_records":
        return prefix + "_records"
    return prefix + "_record" + suffix


class RecordingLogger:
    """
    In-memory logger for asserting on log output in tests.

    Inject it wherever the code under test expects a logger with a
    ``log(level, message, context)`` method, then query it with the
    ``has_*`` helpers.

    Args:
        level_map: Optional mapping from standard severity names to the
            level values the code under test actually uses. Names that are
            not listed keep their identity mapping.

    Example::

        from recording_logger import RecordingLogger

        logger = RecordingLogger()
        service = Service(logger=logger)
        service.run()

        assert logger.has_warning("Disk almost full")
        assert logger.has_error_that_contains("timeout")
        assert logger.has_records("info")

    For each standard severity ``<lvl>`` the following shortcuts exist and
    delegate to the generic query with the mapped level appended::

        has_<lvl>(record)                 -> has_record(record, level)
        has_<lvl>_records()               -> has_records(level)
        has_<lvl>_that_contains(text)     -> has_record_that_contains(text, level)
        has_<lvl>_that_matches(pattern)   -> has_record_that_matches(pattern, level)
        has_<lvl>_that_passes(predicate)  -> has_record_that_passes(predicate, level)
    """

    def __init__(self, level_map: Mapping[str, Level] | None = None) -> None:
        self._level_map = build_level_map(level_map)
        self._store = RecordStore()
        self._dispatch = self._build_dispatch()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def level_map(self) -> Mapping[str, Level]:
        """Return the level map in use."""
        return self._level_map

    @property
    def records(self) -> tuple[LogRecord, ...]:
        """Return all captured records in insertion order."""
        return self._store.records

    @property
    def records_by_level(self) -> Mapping[Level, tuple[LogRecord, ...]]:
        """Return captured records grouped by level value."""
        return self._store.records_by_level

    def __len__(self) -> int:
        return len(self._store)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def log(self, level: Level, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """
        Capture a log entry.

        The level is stored as given; it is not checked against the level
        map. Messages are converted with ``str()`` and stored without any
        placeholder interpolation.

        Args:
            level: Level value used by the caller.
            message: The log message, a str or an object with ``__str__``.
            context: Optional structured metadata (default empty).
        """
        self._store.append(LogRecord(level, str(message), context or {}))

    def emergency(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``emergency``."""
        self.log(self._level_map[LogLevel.EMERGENCY], message, context)

    def alert(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``alert``."""
        self.log(self._level_map[LogLevel.ALERT], message, context)

    def critical(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``critical``."""
        self.log(self._level_map[LogLevel.CRITICAL], message, context)

    def error(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``error``."""
        self.log(self._level_map[LogLevel.ERROR], message, context)

    def warning(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``warning``."""
        self.log(self._level_map[LogLevel.WARNING], message, context)

    def notice(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``notice``."""
        self.log(self._level_map[LogLevel.NOTICE], message, context)

    def info(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``info``."""
        self.log(self._level_map[LogLevel.INFO], message, context)

    def debug(self, message: Any, context: Mapping[str, Any] | None = None) -> None:
        """Log at the level mapped to ``debug``."""
        self.log(self._level_map[LogLevel.DEBUG], message, context)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_records(self, level: Level) -> bool:
        """Return True if anything was logged at ``level``."""
        return self._store.has_level(level)

    def has_record(self, record: str | Mapping[str, Any] | LogRecord, level: Level) -> bool:
        """
        Return True if a record with the given message exists at ``level``.

        Args:
            record: A message string, or a mapping with ``message`` and an
                optional ``context``, or a LogRecord. The context is only
                compared when one is given. Any other value matches nothing.
            level: Level value to search.

        Contexts are compared with Python mapping equality: key order is
        ignored and values compare with ``==``, so ``True``, ``1`` and
        ``1.0`` are equal.
        """
        if isinstance(record, str):
            message, context = record, None
        elif isinstance(record, LogRecord):
            message, context = record.message, record.context
        elif isinstance(record, Mapping):
            message, context = record.get("message"), record.get("context")
        else:
            return False

        def _matches(rec: LogRecord, _index: int) -> bool:
            if rec.message != message:
                return False
            return context is None or dict(rec.context) == dict(context)

        return self.has_record_that_passes(_matches, level)

    def has_record_that_contains(self, message: str, level: Level) -> bool:
        """Return True if a message at ``level`` contains ``message`` (case-sensitive)."""
        return self.has_record_that_passes(lambda rec, _i: message in rec.message, level)

    def has_record_that_matches(self, pattern: str | re.Pattern[str], level: Level) -> bool:
        """
        Return True if a message at ``level`` matches ``pattern``.

        Uses ``re.search``, so the pattern is not anchored unless it says so.
        The pattern is only compiled when ``level`` has records.

        Raises:
            re.error: If ``pattern`` is not a valid regular expression.
        """
        if not self._store.has_level(level):
            return False

        regex = re.compile(pattern)
        return self.has_record_that_passes(
            lambda rec, _i: regex.search(rec.message) is not None, level
        )

    def has_record_that_passes(self, predicate: Predicate, level: Level) -> bool:
        """
        Return True if ``predicate(record, index)`` is truthy for a record at ``level``.

        Records are visited in insertion order and iteration stops at the
        first match. ``index`` is the position within the level's bucket.
        """
        if not self._store.has_level(level):
            return False

        for index, rec in enumerate(self._store.bucket(level)):
            if predicate(rec, index):
                return True
        return False

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Discard all captured records."""
        if len(self._store):
            _log.debug("Discarding %d captured record(s)", len(self._store))
        self._store.clear()

    # ------------------------------------------------------------------
    # Convenience dispatch
    # ------------------------------------------------------------------

    def _build_dispatch(self) -> dict[str, Callable[..., bool]]:
        """Bind every has_<lvl>* shortcut to its generic query and mapped level."""
        dispatch: dict[str, Callable[..., bool]] = {}
        for name in STANDARD_LEVELS:
            level = self._level_map[name]
            for suffix in _CONVENIENCE_SUFFIXES:
                generic = getattr(self, _generic_method_name("has", suffix))
                dispatch[f"has_{name}{suffix}"] = partial(generic, level=level)
        return dispatch

    def convenience_methods(self) -> list[str]:
        """Return the names of all per-level shortcut methods."""
        return sorted(self.__dict__.get("_dispatch", ()))

    def __getattr__(self, name: str) -> Callable[..., bool]:
        dispatch = self.__dict__.get("_dispatch")
        if dispatch is None or name.startswith("__"):
            raise AttributeError(name)

        match = _CONVENIENCE_NAME.fullmatch(name)
        if match is not None:
            key = f"{match['prefix']}_{match['level'].lower()}{match['suffix']}"
            method = dispatch.get(key)
            if method is not None:
                return method

        _log.debug("Unresolved convenience method: %s", name)
        raise UnknownMethodError(type(self).__name__, name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.convenience_methods()))
