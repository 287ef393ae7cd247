"""
Authorisation — get a token, give it back.
"""

from typing import Optional

from strava_mcp.api.registry import registry
from strava_mcp.sdk import auth as sdk_auth
from strava_mcp.sdk.client import StravaClient, Token


def exchange_token(client_id: int, client_secret: str, code: str, scope: Optional[str] = None) -> Token:
    """Trade an OAuth authorisation code for a Token."""
    return sdk_auth.exchange_token(StravaClient(), client_id, client_secret, code, scope)


def deauthorise(token: Token) -> None:
    """Revoke the token at Strava and drop its cached services."""
    client = registry.get(token, StravaClient)
    sdk_auth.deauthorise(client)
    registry.revoke(token)
