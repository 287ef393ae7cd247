"""
Athlete tools for the Strava MCP server.
"""

from fastmcp import Context

from strava_mcp.api.athletes import AthleteService
from strava_mcp.client_factory import get_service
from strava_mcp.utils import dump_model


def register_tools(app):
    """Register athlete tools with the MCP app."""

    @app.tool()
    async def get_authenticated_athlete(ctx: Context) -> str:
        """
        Get the profile of the athlete who owns the session token.

        Returns:
            JSON with the athlete's profile, clubs, bikes and shoes
        """
        service = await get_service(ctx, AthleteService)
        return dump_model(service.get_authenticated_athlete(), "No authenticated athlete")

    @app.tool()
    async def get_athlete(athlete_id: int, ctx: Context) -> str:
        """
        Get another athlete's public profile.

        Args:
            athlete_id: The athlete id
        """
        service = await get_service(ctx, AthleteService)
        return dump_model(service.get_athlete(athlete_id), f"Athlete {athlete_id} not found")

    return app
