# backend/exceptions.py

"""Shared exceptions for the application.

Every error the API reports derives from ``DocSummError`` and carries the
HTTP status and the message that is safe to show to the user.
"""


class DocSummError(Exception):
    """Base class for errors that map onto an ``{error}`` response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DocumentValidationError(DocSummError):
    """Rejected input: wrong type, oversized file, empty text."""

    status_code = 400
    default_message = "Invalid request"


class ConfigurationError(DocSummError):
    """A required credential or backend is not configured."""

    status_code = 500
    default_message = "Service not configured"


class ExtractionError(DocSummError):
    """The document conversion library failed."""

    status_code = 500
    default_message = "Failed to extract text from file"


class SummarizationError(DocSummError):
    """The generative model call failed."""

    status_code = 500
    default_message = "Failed to generate summary. Please check your API key and try again."


class CircuitBreakerOpenError(SummarizationError):
    """Raised when circuit breaker is open due to repeated LLM failures."""
    pass


class HistoryNotFoundError(DocSummError):
    """No history record with that id for the current user."""

    status_code = 404
    default_message = "Summary not found"


class SummarizerApiError(Exception):
    """Client-side view of an ``{error}`` response from the API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
