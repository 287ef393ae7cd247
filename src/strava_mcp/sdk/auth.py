"""
Strava OAuth SDK functions.

Token exchange and deauthorisation live outside the /api/v3 tree.
"""

import os
from typing import Optional

from strava_mcp.sdk.client import StravaClient, Token, parse_scopes

AUTH_URL = os.environ.get("STRAVA_AUTH_URL", "https://www.strava.com/oauth")


def exchange_token(
    client: StravaClient,
    client_id: int,
    client_secret: str,
    code: str,
    scope: Optional[str] = None,
) -> Token:
    """
    Exchange an authorisation code for an access token.

    POST oauth/token

    Args:
        client: StravaClient instance (no token needed)
        client_id: Application id
        client_secret: Application secret
        code: Code returned to the redirect URI
        scope: Scope string returned to the redirect URI; the token
            response body does not repeat it

    Returns:
        Token with athlete id and granted scopes
    """
    if not code:
        raise ValueError("Missing authorisation code")

    data = client.make_request(
        "POST",
        f"{AUTH_URL}/token",
        params={
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
            "grant_type": "authorization_code",
        },
        require_auth=False,
    )

    athlete = data.get("athlete") or {}
    return Token(
        access_token=data["access_token"],
        athlete_id=athlete.get("id"),
        scopes=parse_scopes(scope or data.get("scope", "")),
        refresh_token=data.get("refresh_token"),
        expires_at=data.get("expires_at"),
        token_type=data.get("token_type", "Bearer"),
    )


def deauthorise(client: StravaClient) -> None:
    """
    Revoke the client's token.

    POST oauth/deauthorize
    """
    client.make_request("POST", f"{AUTH_URL}/deauthorize")
