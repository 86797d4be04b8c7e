"""
Captured log record.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from recording_logger.levels import Level


def _empty_context() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class LogRecord:
    """
    One captured ``log()`` call.

    The context is deep-copied on construction and exposed read-only, so a
    record does not change when the caller later mutates the dict it passed
    in or any nested value inside it.

    Records hash on level and message only; the context takes part in
    equality but not in the hash.

    Args:
        level: The level value exactly as submitted.
        message: The log message text.
        context: Structured metadata attached to the call (default empty).
    """

    level: Level
    message: str
    context: Mapping[str, Any] = field(default_factory=_empty_context, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(copy.deepcopy(dict(self.context))))

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a plain dict."""
        return {
            "level": self.level,
            "message": self.message,
            "context": copy.deepcopy(dict(self.context)),
        }
