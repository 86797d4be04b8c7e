"""
Tests for the recording_logger pytest fixture.
"""

from __future__ import annotations

from recording_logger import RecordingLogger
from recording_logger.pytest_plugin import recording_logger, recording_logger_level_map  # noqa: F401


def test_fixture_provides_logger(recording_logger: RecordingLogger) -> None:  # noqa: F811
    """The fixture yields an empty logger with the default level map."""
    assert isinstance(recording_logger, RecordingLogger)
    assert len(recording_logger) == 0
    assert recording_logger.level_map["warning"] == "warning"


def test_fixture_is_fresh_per_test(recording_logger: RecordingLogger) -> None:  # noqa: F811
    recording_logger.log("info", "only in this test")
    assert len(recording_logger) == 1


def test_fixture_in_use(recording_logger: RecordingLogger) -> None:  # noqa: F811
    """Typical use: inject the fixture into code under test."""

    def handle(order_id: int, logger: RecordingLogger) -> None:
        logger.log("info", "Order processed", {"order_id": order_id})

    handle(7, recording_logger)

    assert recording_logger.has_info({"message": "Order processed", "context": {"order_id": 7}})
    assert len(recording_logger) == 1
