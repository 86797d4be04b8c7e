"""
Exceptions raised by recording-logger.
"""


class LevelMapError(ValueError):
    """Raised when a level map override is not usable."""


class UnknownMethodError(AttributeError):
    """
    Raised when a convenience method name cannot be resolved.

    Subclasses AttributeError so that ``hasattr()`` and ``getattr()`` with a
    default behave normally on a RecordingLogger.
    """

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"Call to undefined method {owner}.{name}()")
        self.owner = owner
        self.name = name
