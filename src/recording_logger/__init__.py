"""
recording-logger: in-memory logger for asserting on log output in tests.

Captures every log call with its level, message and structured context,
and provides query helpers such as ``has_warning()`` or
``has_error_that_contains()`` to verify what the code under test logged.
"""

__version__ = "0.1.0"

from recording_logger.capability import LoggerCapability
from recording_logger.errors import LevelMapError, UnknownMethodError
from recording_logger.levels import STANDARD_LEVELS, LogLevel, build_level_map
from recording_logger.logger import RecordingLogger
from recording_logger.record import LogRecord
from recording_logger.store import RecordStore

__all__ = [
    "__version__",
    # Core
    "RecordingLogger",
    "LoggerCapability",
    "LogRecord",
    "RecordStore",
    # Levels
    "LogLevel",
    "STANDARD_LEVELS",
    "build_level_map",
    # Errors
    "LevelMapError",
    "UnknownMethodError",
]
