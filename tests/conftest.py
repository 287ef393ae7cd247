"""
Shared pytest fixtures for Strava MCP testing.
"""
import pytest
from unittest.mock import AsyncMock, Mock, patch

# Monkey-patch: production uses fastmcp.FastMCP, tests use mcp.server.fastmcp.
# Patch fastmcp.Context to match mcp.server.fastmcp.Context so tools work
# with the test FastMCP.
import fastmcp
from mcp.server.fastmcp import server as mcp_server
fastmcp.Context = mcp_server.Context

from strava_mcp.api.registry import registry
from strava_mcp.sdk.client import StravaClient, Token
from strava_mcp.sdk.types import AuthorisationScope


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts with no cached services."""
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def read_token():
    """Token with no write or view_private scope."""
    return Token(access_token="read_token_1234", athlete_id=1001, scopes=[AuthorisationScope.READ])


@pytest.fixture
def full_token():
    """Token with write and view_private scopes."""
    return Token(
        access_token="full_token_5678",
        athlete_id=1001,
        scopes=[
            AuthorisationScope.READ,
            AuthorisationScope.ACTIVITY_READ_ALL,
            AuthorisationScope.ACTIVITY_WRITE,
        ],
    )


@pytest.fixture
def mock_client():
    """A StravaClient whose make_request is a Mock."""
    client = Mock(spec=StravaClient)
    client.make_request = Mock()
    return client


@pytest.fixture
def mock_service():
    """Stands in for every service the tool modules ask for."""
    return Mock()


@pytest.fixture
def session_state():
    """Give the test FastMCP Context the session-scoped state of fastmcp's.

    Every call_tool on the test app shares one session, backed by this dict.
    """
    state = {}

    async def get_state(self, key):
        return state.get(key)

    async def set_state(self, key, value):
        state[key] = value

    with patch.object(mcp_server.Context, "get_state", get_state, create=True), \
            patch.object(mcp_server.Context, "set_state", set_state, create=True):
        yield state


@pytest.fixture(autouse=True)
def mock_get_service(mock_service):
    """Auto-mock client_factory.get_service in all tool modules.

    Yields the mock function (not the service) so tests can set side_effect
    for error scenarios like "no session".
    """
    get_service_fn = AsyncMock(return_value=mock_service)

    modules_to_patch = [
        "strava_mcp.activities",
        "strava_mcp.athletes",
        "strava_mcp.clubs",
        "strava_mcp.segments",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_service", get_service_fn)
        p.start()
        patchers.append(p)

    yield get_service_fn

    for p in patchers:
        p.stop()
