"""
Activity tools for the Strava MCP server.

Thin wrappers over ActivityService: listing, details, comments, kudos.
"""

import json
from datetime import datetime

from fastmcp import Context

from strava_mcp.api.activities import ActivityService
from strava_mcp.client_factory import get_service
from strava_mcp.utils import dump_list, dump_model, paging_for, summarize_activities


def register_tools(app):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def list_my_activities(
        ctx: Context,
        before: str = None,
        after: str = None,
        page: int = 1,
        size: int = 30,
    ) -> str:
        """
        List the authenticated athlete's activities, newest first.

        Private activities the token may not read show as {"id", "private": true}.

        Args:
            before: Only activities before this date, YYYY-MM-DD (optional)
            after: Only activities after this date, YYYY-MM-DD (optional)
            page: Page number starting at 1; 0 fetches every page
            size: Activities per page (max 200)

        Returns:
            JSON with count and compact activity rows
        """
        service = await get_service(ctx, ActivityService)
        activities = service.list_authenticated_athlete_activities(
            datetime.strptime(before, "%Y-%m-%d") if before else None,
            datetime.strptime(after, "%Y-%m-%d") if after else None,
            paging_for(page, size),
        )
        rows = summarize_activities(activities)
        return json.dumps({"count": len(rows), "activities": rows}, indent=2)

    @app.tool()
    async def get_activity(activity_id: int, ctx: Context, include_all_efforts: bool = False) -> str:
        """
        Get a Strava activity.

        Args:
            activity_id: The activity id
            include_all_efforts: Include every segment effort, not just the notable ones

        Returns:
            JSON with the activity, or an error if it does not exist
        """
        service = await get_service(ctx, ActivityService)
        activity = service.get_activity(activity_id, include_all_efforts)
        return dump_model(activity, f"Activity {activity_id} not found")

    @app.tool()
    async def list_activity_comments(activity_id: int, ctx: Context, page: int = 0, size: int = 30) -> str:
        """
        List comments on an activity.

        Args:
            activity_id: The activity id
            page: Page number starting at 1; 0 (default) fetches every page
            size: Comments per page (max 200)
        """
        service = await get_service(ctx, ActivityService)
        comments = service.list_activity_comments(activity_id, paging=paging_for(page, size))
        return dump_list(comments, "comments", f"Activity {activity_id} not found")

    @app.tool()
    async def list_activity_kudoers(activity_id: int, ctx: Context, page: int = 0, size: int = 30) -> str:
        """
        List athletes who gave kudos to an activity.

        Args:
            activity_id: The activity id
            page: Page number starting at 1; 0 (default) fetches every page
            size: Athletes per page (max 200)
        """
        service = await get_service(ctx, ActivityService)
        kudoers = service.list_activity_kudoers(activity_id, paging_for(page, size))
        return dump_list(kudoers, "athletes", f"Activity {activity_id} not found")

    @app.tool()
    async def list_activity_laps(activity_id: int, ctx: Context) -> str:
        """
        List the laps of an activity.

        Args:
            activity_id: The activity id
        """
        service = await get_service(ctx, ActivityService)
        laps = service.list_activity_laps(activity_id)
        return dump_list(laps, "laps", f"Activity {activity_id} not found")

    @app.tool()
    async def give_kudos(activity_id: int, ctx: Context) -> str:
        """
        Give kudos to an activity. Needs a token with write access.

        Args:
            activity_id: The activity id
        """
        service = await get_service(ctx, ActivityService)
        service.give_kudos(activity_id)
        return json.dumps({"success": True, "activity_id": activity_id}, indent=2)

    @app.tool()
    async def create_comment(activity_id: int, text: str, ctx: Context) -> str:
        """
        Comment on an activity. Needs a token with write access.

        Args:
            activity_id: The activity id
            text: Comment text
        """
        service = await get_service(ctx, ActivityService)
        comment = service.create_comment(activity_id, text)
        return json.dumps(comment.to_dict(), indent=2)

    return app
