"""
pytest plugin providing a ``recording_logger`` fixture.

Registered through the ``pytest11`` entry point, so the fixture is available
in any test session once recording-logger is installed.
"""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from recording_logger.levels import Level
from recording_logger.logger import RecordingLogger


@pytest.fixture
def recording_logger_level_map() -> Mapping[str, Level] | None:
    """
    Level map used by the ``recording_logger`` fixture.

    Override this fixture in a test module or conftest.py to remap the
    standard severity names, e.g. to integer levels.
    """
    return None


@pytest.fixture
def recording_logger(
    recording_logger_level_map: Mapping[str, Level] | None,
) -> RecordingLogger:
    """Create a fresh RecordingLogger for each test."""
    return RecordingLogger(level_map=recording_logger_level_map)
