"""Exceptions raised by the Miniflux client."""


class MinifluxError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MinifluxError, ValueError):
    """Raised when the client is constructed with incomplete settings."""


class APIError(MinifluxError):
    """Raised when Miniflux answers with a non-success status code.

    Client errors (4xx) and server errors (5xx) share this one type; only
    ``status_code`` and the message tell them apart.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
