# errors.py
# Error taxonomy for the orchestration layer. Every kind is caught at the
# invoker boundary and shown to the user as a single message.


class PlaygroundError(Exception):
    """Base class for all orchestration failures."""


class EngineInitError(PlaygroundError):
    """Raised when the engine fails to load. Blocks submissions until a reload succeeds."""


class EngineNotReadyError(PlaygroundError):
    """Raised when a submission reaches the engine before it is initialized."""


class InvalidNumericInputError(PlaygroundError):
    """Raised when a numeric field is not a non-negative integer string."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Invalid numeric input for {field}: {value!r}")
        self.field = field
        self.value = value


class EngineExecutionError(PlaygroundError):
    """Raised when the engine rejects a request (bad script, bad account state)."""
