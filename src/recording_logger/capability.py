"""
Logger capability consumed by code under test.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from recording_logger.levels import Level


@runtime_checkable
class LoggerCapability(Protocol):
    """
    Protocol for an injectable logger.

    Code under test only needs an object with a ``log`` method; the
    ``has_*`` assertion helpers on RecordingLogger are not part of it.
    """

    def log(self, level: Level, message: str, context: Mapping[str, Any] | None = None) -> None:
        """
        Submit a log entry.

        Args:
            level: Severity value, standard name or a custom str/int.
            message: The log message.
            context: Optional structured metadata.
        """
        ...
