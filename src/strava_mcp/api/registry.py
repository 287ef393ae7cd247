"""
Token-scoped instance registry.

Holds one instance per (access token, class): the HTTP client and each
resource service are built once per token and reused. Building twice is
harmless, so setdefault() is all the coordination concurrent callers need.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from strava_mcp.sdk.client import Token

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Instances keyed by (access_token, class)."""

    def __init__(self):
        self._instances: Dict[Tuple[str, type], Any] = {}

    def get(self, token: Token, cls: type, factory: Optional[Callable[[Token], Any]] = None) -> Any:
        """
        Return the instance of cls for token, building it on first use.

        Args:
            token: Access token the instance is scoped to
            cls: Class used as part of the key
            factory: Builds the instance from the token (defaults to cls)
        """
        key = (token.access_token, cls)
        instance = self._instances.get(key)
        if instance is not None:
            return instance

        created = (factory or cls)(token)
        instance = self._instances.setdefault(key, created)
        if instance is created:
            logger.info(f"Created {cls.__name__} for token ...{token.access_token[-4:]}")
        return instance

    def revoke(self, token: Token) -> int:
        """Drop every instance held for token. Returns how many were dropped."""
        keys = [k for k in self._instances if k[0] == token.access_token]
        for key in keys:
            self._instances.pop(key, None)
        if keys:
            logger.info(f"Evicted {len(keys)} instance(s) for token ...{token.access_token[-4:]}")
        return len(keys)

    def clear(self) -> None:
        self._instances.clear()

    def __len__(self) -> int:
        return len(self._instances)


registry = ServiceRegistry()
