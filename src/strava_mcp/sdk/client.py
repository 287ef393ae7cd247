"""
Strava v3 HTTP Client.

Handles HTTP transport, bearer authentication, and status-to-error mapping.
All endpoint-specific logic lives in the sibling modules (activities, clubs, etc.).
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from strava_mcp.sdk.exceptions import error_for_status
from strava_mcp.sdk.types import AuthorisationScope, VIEW_PRIVATE_SCOPES, WRITE_SCOPES

logger = logging.getLogger(__name__)

API_URL = os.environ.get("STRAVA_API_URL", "https://www.strava.com/api/v3")


def parse_scopes(scope: str) -> List[AuthorisationScope]:
    """Parse a comma separated scope string, ignoring scopes we don't know."""
    scopes = []
    for item in (scope or "").split(","):
        item = item.strip()
        if not item:
            continue
        try:
            scopes.append(AuthorisationScope(item))
        except ValueError:
            logger.debug(f"Ignoring unknown scope {item!r}")
    return scopes


@dataclass
class Token:
    """Strava access token and the scopes it was granted."""
    access_token: str
    athlete_id: Optional[int] = None
    scopes: List[AuthorisationScope] = field(default_factory=list)
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    token_type: str = "Bearer"

    @property
    def has_write_access(self) -> bool:
        return any(s in WRITE_SCOPES for s in self.scopes)

    @property
    def has_view_private(self) -> bool:
        return any(s in VIEW_PRIVATE_SCOPES for s in self.scopes)

    def to_json(self) -> str:
        return json.dumps({
            "access_token": self.access_token,
            "athlete_id": self.athlete_id,
            "scopes": [s.value for s in self.scopes],
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at,
            "token_type": self.token_type,
        })

    @classmethod
    def from_json(cls, token_data: str) -> "Token":
        data = json.loads(token_data)
        return cls(
            access_token=data["access_token"],
            athlete_id=data.get("athlete_id"),
            scopes=parse_scopes(",".join(data.get("scopes") or [])),
            refresh_token=data.get("refresh_token"),
            expires_at=data.get("expires_at"),
            token_type=data.get("token_type", "Bearer"),
        )


class StravaClient:
    """
    Strava v3 HTTP transport.

    One client per access token. Endpoint calls are in sibling modules
    (sdk.activities, sdk.athletes, sdk.clubs, sdk.segments).
    """

    def __init__(self, token: Token = None, api_url: str = None):
        self._token = token
        self._api_url = (api_url or API_URL).rstrip("/")
        self._session = requests.Session()

    @property
    def token(self) -> Optional[Token]:
        return self._token

    def make_request(
        self,
        method: str,
        endpoint: str,
        params: Dict = None,
        json_data: Dict = None,
        require_auth: bool = True,
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE)
            endpoint: API path relative to the base URL (e.g. "activities/123"),
                or an absolute URL
            params: Query parameters
            json_data: JSON body data
            require_auth: Whether a bearer token is required

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            RuntimeError: If no token is set but auth is required
            StravaAPIError: Subclass matching the HTTP status on failure
        """
        access_token = self._token.access_token if self._token else None
        if require_auth and not access_token:
            raise RuntimeError("No Strava access token. Call set_strava_session() first.")

        headers = {"Accept": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        if endpoint.startswith("http"):
            url = endpoint
        else:
            url = f"{self._api_url}/{endpoint}"

        response = self._session.request(
            method.upper(), url, headers=headers, params=params, json=json_data,
        )
        logger.debug(f"{method.upper()} {endpoint} -> {response.status_code}")

        if response.status_code >= 400:
            body = _safe_json(response)
            message = body.get("message") if isinstance(body, dict) else None
            raise error_for_status(response.status_code)(
                f"{message or response.reason or 'Strava API error'} "
                f"(status={response.status_code}, endpoint={endpoint})",
                status_code=response.status_code,
                response=body if isinstance(body, dict) else None,
            )

        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def page_params(page: Optional[int], per_page: Optional[int]) -> Dict[str, Any]:
    """Query parameters for a paged endpoint, omitting unset values."""
    params = {}
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page
    return params


def _safe_json(response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
