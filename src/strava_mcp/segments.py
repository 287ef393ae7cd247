"""
Segment tools for the Strava MCP server.
"""

from fastmcp import Context

from strava_mcp.api.segments import SegmentEffortService, SegmentService
from strava_mcp.client_factory import get_service
from strava_mcp.utils import dump_list, dump_model, paging_for


def register_tools(app):
    """Register segment tools with the MCP app."""

    @app.tool()
    async def get_segment(segment_id: int, ctx: Context) -> str:
        """
        Get a segment.

        Args:
            segment_id: The segment id
        """
        service = await get_service(ctx, SegmentService)
        return dump_model(service.get_segment(segment_id), f"Segment {segment_id} not found")

    @app.tool()
    async def list_starred_segments(ctx: Context, page: int = 0, size: int = 30) -> str:
        """
        List the authenticated athlete's starred segments.

        Args:
            page: Page number starting at 1; 0 (default) fetches every page
            size: Segments per page (max 200)
        """
        service = await get_service(ctx, SegmentService)
        segments = service.list_authenticated_athlete_starred_segments(paging_for(page, size))
        return dump_list(segments, "segments", "No starred segments")

    @app.tool()
    async def get_segment_effort(effort_id: int, ctx: Context) -> str:
        """
        Get a single effort on a segment.

        Args:
            effort_id: The segment effort id
        """
        service = await get_service(ctx, SegmentEffortService)
        return dump_model(service.get_segment_effort(effort_id), f"Segment effort {effort_id} not found")

    return app
