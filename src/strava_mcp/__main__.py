"""
Entry point for running strava_mcp as a module.

Usage:
    python -m strava_mcp                    # Run with stdio transport
    python -m strava_mcp --http             # Run with HTTP transport
    python -m strava_mcp --http --port 9000 # Run HTTP on custom port
"""

import argparse

from strava_mcp import create_app


def main():
    parser = argparse.ArgumentParser(
        description="Strava MCP Server - Strava v3 API tools over the Model Context Protocol"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8081,
        help="Port for HTTP transport (default: 8081)"
    )

    args = parser.parse_args()

    app = create_app()

    if args.http:
        print(f"Starting Strava MCP server on http://{args.host}:{args.port}/mcp")
        app.run(transport="http", host=args.host, port=args.port)
    else:
        app.run()


if __name__ == "__main__":
    main()
