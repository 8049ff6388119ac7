"""Error types raised by the BatchData adapter.

Every error except `ConfigError` is caught at the tool boundary and returned to
the caller as a failure envelope (see `core.envelope`).
"""


class BatchDataError(Exception):
    """Base class for all adapter errors."""


class ConfigError(BatchDataError):
    """Startup configuration is missing or invalid. Fatal to the process."""


class ValidationError(BatchDataError):
    """The supplied parameter combination cannot form a request."""


class ApiRequestError(BatchDataError):
    """The BatchData API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str, message: str | None = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message or f"API request failed: {status_code} {reason}")


class SerializationError(ApiRequestError):
    """The API answered successfully but the body was not valid JSON."""

    def __init__(self, status_code: int, reason: str, detail: str):
        super().__init__(status_code, reason, f"Invalid JSON in API response ({status_code}): {detail}")


class TransportError(BatchDataError):
    """The request failed before any HTTP status was received."""
