"""
Strava v3 Low-Level SDK.

Thin wrapper over the Strava HTTP API.
Each function maps 1:1 to a Strava endpoint and returns decoded JSON.
"""

from strava_mcp.sdk.client import StravaClient, Token, parse_scopes
from strava_mcp.sdk.exceptions import (
    StravaAPIError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
    RateLimitExceededError,
    StravaInternalServerError,
    StravaServiceUnavailableError,
    StravaUnknownAPIError,
)
from strava_mcp.sdk.types import (
    ResourceState,
    AuthorisationScope,
    ActivityType,
    ClubType,
    SportType,
    Gender,
    MeasurementMethod,
    MAX_PAGE_SIZE,
)

__all__ = [
    "StravaClient",
    "Token",
    "parse_scopes",
    "StravaAPIError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "RateLimitExceededError",
    "StravaInternalServerError",
    "StravaServiceUnavailableError",
    "StravaUnknownAPIError",
    "ResourceState",
    "AuthorisationScope",
    "ActivityType",
    "ClubType",
    "SportType",
    "Gender",
    "MeasurementMethod",
    "MAX_PAGE_SIZE",
]
