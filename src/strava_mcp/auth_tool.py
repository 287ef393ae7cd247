"""
Authentication tools for the Strava MCP server.

Provides session setup from an access token or an OAuth code, and logout.
"""

import logging

from fastmcp import Context

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

from strava_mcp.api import exchange_token
from strava_mcp.api.athletes import AthleteService
from strava_mcp.api.registry import registry
from strava_mcp.client_factory import clear_session_token, get_token, set_session_token
from strava_mcp.sdk.client import Token, parse_scopes
from strava_mcp.sdk.exceptions import StravaAPIError


def register_tools(app):
    """Register authentication tools with the MCP app."""

    async def _start_session(ctx: Context, token: Token) -> dict:
        athlete = AthleteService.instance(token).get_authenticated_athlete()
        token.athlete_id = athlete.id
        await set_session_token(ctx, token)
        return {
            "success": True,
            "athlete_id": athlete.id,
            "name": f"{athlete.firstname or ''} {athlete.lastname or ''}".strip(),
            "scopes": [s.value for s in token.scopes],
            "write_access": token.has_write_access,
            "view_private": token.has_view_private,
        }

    @app.tool()
    async def set_strava_session(access_token: str, ctx: Context, scopes: str = "") -> dict:
        """
        Start a Strava session from an existing access token.

        The token is checked by fetching the authenticated athlete.

        Args:
            access_token: Strava OAuth access token
            scopes: Comma separated scopes the token was granted
                (e.g. "read,activity:read_all,activity:write")

        Returns:
            Session result with athlete info or error message
        """
        token = Token(access_token=access_token, scopes=parse_scopes(scopes))
        try:
            return await _start_session(ctx, token)
        except StravaAPIError as e:
            logger.error(f"Error starting Strava session: {e}")
            registry.revoke(token)
            return {"success": False, "error": str(e), "error_code": "INVALID_TOKEN"}

    @app.tool()
    async def exchange_strava_code(
        client_id: int, client_secret: str, code: str, ctx: Context, scope: str = "",
    ) -> dict:
        """
        Start a Strava session from an OAuth authorisation code.

        Args:
            client_id: Strava application id
            client_secret: Strava application secret
            code: The code Strava sent to the redirect URI
            scope: The scope string Strava sent to the redirect URI

        Returns:
            Session result with athlete info and the token for reuse
        """
        try:
            token = exchange_token(client_id, client_secret, code, scope)
            result = await _start_session(ctx, token)
        except StravaAPIError as e:
            logger.error(f"Error exchanging Strava code: {e}")
            return {"success": False, "error": str(e), "error_code": "EXCHANGE_FAILED"}
        result["access_token"] = token.access_token
        return result

    @app.tool()
    async def strava_logout(ctx: Context) -> dict:
        """
        End the current Strava session.

        Forgets the token and its cached services. The token itself stays
        valid at Strava.

        Returns:
            Logout confirmation
        """
        try:
            registry.revoke(await get_token(ctx))
        except ValueError:
            pass  # no session
        await clear_session_token(ctx)
        return {"success": True, "message": "Logged out"}

    return app
