"""
Base class for the per-resource services.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from strava_mcp.api.registry import registry
from strava_mcp.sdk.client import StravaClient, Token
from strava_mcp.sdk.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class StravaService:
    """
    A resource service bound to one access token.

    Use Service.instance(token) rather than the constructor so that every
    caller holding the same token shares one service and one HTTP client.
    """

    def __init__(self, token: Token, client: StravaClient = None):
        self.token = token
        self.client = client or registry.get(token, StravaClient)

    @classmethod
    def instance(cls, token: Token):
        """The shared service for token, carrying the scopes and athlete of the latest token presented."""
        service = registry.get(token, cls)
        if service.token != token:
            logger.info(f"Refreshing {cls.__name__} token details for ...{token.access_token[-4:]}")
            service.token = token
        return service

    def _require_write_access(self, action: str) -> None:
        if not self.token.has_write_access:
            raise UnauthorizedError(f"Cannot {action} without write access")


def to_models(model_cls, data: Optional[List[dict]]) -> list:
    """Convert a JSON list to models; a null body becomes []."""
    return [model_cls.from_dict(d) for d in data or []]


def epoch_seconds(value: Optional[datetime]) -> Optional[int]:
    """Seconds since the Unix epoch. Naive datetimes are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
