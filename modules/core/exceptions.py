"""
Custom Exceptions.

Console-specific exception classes. None of these are recovered locally:
each one aborts the current operation and is reported by the entry point.
"""


class ConsoleError(Exception):
    """Base exception for all console errors."""

    def __init__(self, message: str, code: str = "CONSOLE_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ConsoleError):
    """Raised when the configuration file is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class FetchFailure(ConsoleError):
    """Raised when the API cannot be reached or answers with an error status."""

    def __init__(self, message: str = "Failed to fetch from API", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="API_FETCH_FAILED")


class MalformedEnvelope(ConsoleError):
    """Raised when a response body is not a collection envelope."""

    def __init__(self, message: str = "Malformed collection envelope") -> None:
        super().__init__(message, code="DATA_MALFORMED_ENVELOPE")


class MalformedField(ConsoleError):
    """Raised when a recognized data field carries a payload of the wrong shape."""

    def __init__(self, field_name: str, message: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(
            message or f"Malformed value for field '{field_name}'",
            code="DATA_MALFORMED_FIELD",
        )


class InputReadFailure(ConsoleError):
    """Raised when operator input cannot be read."""

    def __init__(self, message: str = "Failed to read input") -> None:
        super().__init__(message, code="IO_INPUT_READ_FAILED")
