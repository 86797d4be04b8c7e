"""
Tests for configuring the recording_logger fixture through its level map fixture.
"""

from __future__ import annotations

import pytest

from recording_logger import RecordingLogger
from recording_logger.pytest_plugin import recording_logger  # noqa: F401


@pytest.fixture
def recording_logger_level_map() -> dict[str, int]:
    return {"warning": 300, "error": 400}


def test_fixture_uses_overridden_level_map(recording_logger: RecordingLogger) -> None:  # noqa: F811
    recording_logger.log(300, "slow")

    assert recording_logger.has_warning("slow")
    assert recording_logger.has_records(300)
    assert recording_logger.level_map["info"] == "info"
