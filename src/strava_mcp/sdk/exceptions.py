"""
Strava API errors.

make_request() picks the class from the HTTP status code. Services raise
UnauthorizedError and NotFoundError themselves for failed preconditions,
in which case status_code is None.
"""

from typing import Optional


class StravaAPIError(Exception):
    """Base class for every error raised by this package's Strava calls."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class BadRequestError(StravaAPIError):
    """HTTP 400."""


class UnauthorizedError(StravaAPIError):
    """HTTP 401/403, or a missing scope / inaccessible private resource."""


class NotFoundError(StravaAPIError):
    """HTTP 404, or the target of a write does not exist."""


class RateLimitExceededError(StravaAPIError):
    """HTTP 429."""


class StravaInternalServerError(StravaAPIError):
    """HTTP 500."""


class StravaServiceUnavailableError(StravaAPIError):
    """HTTP 503."""


class StravaUnknownAPIError(StravaAPIError):
    """Any other non-success status."""


STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    429: RateLimitExceededError,
    500: StravaInternalServerError,
    503: StravaServiceUnavailableError,
}


def error_for_status(status_code: int) -> type:
    """Exception class for a non-success HTTP status."""
    return STATUS_ERRORS.get(status_code, StravaUnknownAPIError)
