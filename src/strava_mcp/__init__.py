"""
Strava v3 client library with an MCP server.

The library lives in strava_mcp.sdk (HTTP, one function per endpoint) and
strava_mcp.api (typed services with paging and privacy handling). This
module assembles the MCP server that exposes them as tools.

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For multi-user HTTP server deployment
"""

import os

from fastmcp import FastMCP

from strava_mcp import auth_tool
from strava_mcp import activities
from strava_mcp import athletes
from strava_mcp import clubs
from strava_mcp import segments


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("Strava v3")

    # Session tools (token, OAuth code, logout)
    app = auth_tool.register_tools(app)

    # Resource tools
    app = activities.register_tools(app)
    app = athletes.register_tools(app)
    app = clubs.register_tools(app)
    app = segments.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
