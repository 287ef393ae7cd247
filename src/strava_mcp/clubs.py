"""
Club tools for the Strava MCP server.
"""

from fastmcp import Context

from strava_mcp.api.clubs import ClubService
from strava_mcp.client_factory import get_service
from strava_mcp.utils import dump_list, dump_model, paging_for


def register_tools(app):
    """Register club tools with the MCP app."""

    @app.tool()
    async def list_my_clubs(ctx: Context) -> str:
        """List the clubs the authenticated athlete belongs to."""
        service = await get_service(ctx, ClubService)
        return dump_list(service.list_authenticated_athlete_clubs(), "clubs", "No clubs")

    @app.tool()
    async def get_club(club_id: int, ctx: Context) -> str:
        """
        Get a club.

        Args:
            club_id: The club id
        """
        service = await get_service(ctx, ClubService)
        return dump_model(service.get_club(club_id), f"Club {club_id} not found")

    @app.tool()
    async def list_club_members(club_id: int, ctx: Context, page: int = 1, size: int = 30) -> str:
        """
        List members of a club. Private clubs list no members to non-members.

        Args:
            club_id: The club id
            page: Page number starting at 1; 0 fetches every page
            size: Members per page (max 200)
        """
        service = await get_service(ctx, ClubService)
        members = service.list_club_members(club_id, paging_for(page, size))
        return dump_list(members, "athletes", f"Club {club_id} not found")

    return app
