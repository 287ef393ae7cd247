"""
Service factory for the Strava MCP server.

Each MCP connection keeps its Strava token in FastMCP Context state, which
FastMCP scopes to the client session: set_strava_session stores it once and
later tool calls on the same session read it back. Nothing is written to
disk, so a restarted server needs set_strava_session again.
"""

from fastmcp import Context

from strava_mcp.sdk.client import Token


STRAVA_TOKEN_KEY = "strava_token"


async def get_token(ctx: Context) -> Token:
    """
    Get the session's Strava token.

    Raises:
        ValueError: If no Strava session is active
    """
    token_data = await ctx.get_state(STRAVA_TOKEN_KEY)
    if not token_data:
        raise ValueError("No Strava session. Call set_strava_session() first.")
    return Token.from_json(token_data)


async def get_service(ctx: Context, service_cls):
    """
    Get the token-scoped service instance for this session.

    Usage in tools:
        @app.tool()
        async def get_activity(activity_id: int, ctx: Context) -> str:
            service = await get_service(ctx, ActivityService)
            return dump_model(service.get_activity(activity_id), "Activity not found")
    """
    return service_cls.instance(await get_token(ctx))


async def set_session_token(ctx: Context, token: Token) -> None:
    await ctx.set_state(STRAVA_TOKEN_KEY, token.to_json())


async def clear_session_token(ctx: Context) -> None:
    await ctx.set_state(STRAVA_TOKEN_KEY, None)
