"""
Application errors for clean API error handling.

ApiError is raised by handlers and rendered as {"error": message} by the app.
GatewayErrorKind classifies AI provider failures; those never become HTTP errors.
"""

from enum import Enum


class ApiError(Exception):
    """Raised when a request must end with a non-200 status and a user-facing message."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class GatewayErrorKind(str, Enum):
    """Why an AI provider call produced no usable reply."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"
    NO_CANDIDATES = "no_candidates"
    EMPTY = "empty"
