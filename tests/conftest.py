"""
Shared fixtures for recording-logger tests.
"""

import pytest

from recording_logger import RecordingLogger


@pytest.fixture
def int_level_map() -> dict[str, int]:
    """Integer severities in the style of Monolog levels."""
    return {
        "emergency": 600,
        "alert": 550,
        "critical": 500,
        "error": 400,
        "warning": 300,
        "notice": 250,
        "info": 200,
        "debug": 100,
    }


@pytest.fixture
def logger() -> RecordingLogger:
    """Create a fresh logger with the default level map."""
    return RecordingLogger()


@pytest.fixture
def int_logger(int_level_map: dict[str, int]) -> RecordingLogger:
    """Create a fresh logger using integer level values."""
    return RecordingLogger(level_map=int_level_map)
