"""
Tests for Strava MCP athlete tools.
"""
import json

import pytest
from mcp.server.fastmcp import FastMCP

from strava_mcp import athletes
from strava_mcp.api.athletes import AthleteService
from strava_mcp.api.model import Athlete, Gear
from strava_mcp.api.privacy import private_athlete
from strava_mcp.sdk.types import Gender
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_athletes():
    """Create FastMCP app with athlete tools registered."""
    app = FastMCP("Test Strava Athletes")
    app = athletes.register_tools(app)
    return app


@pytest.mark.asyncio
async def test_get_authenticated_athlete(app_with_athletes, mock_service, mock_get_service):
    mock_service.get_authenticated_athlete.return_value = Athlete(
        id=1001, firstname="Marianne", sex=Gender.FEMALE,
        bikes=[Gear(id="b1", name="Road", primary=True)],
    )

    result = await app_with_athletes.call_tool("get_authenticated_athlete", {})
    data = json.loads(get_tool_result_text(result))

    assert data["id"] == 1001
    assert data["sex"] == "F"
    assert data["bikes"] == [{"id": "b1", "name": "Road", "primary": True}]
    assert mock_get_service.call_args[0][1] is AthleteService


@pytest.mark.asyncio
async def test_get_athlete_hidden(app_with_athletes, mock_service):
    mock_service.get_athlete.return_value = private_athlete(8)

    result = await app_with_athletes.call_tool("get_athlete", {"athlete_id": 8})
    data = json.loads(get_tool_result_text(result))

    assert data == {"id": 8, "resource_state": 100}


@pytest.mark.asyncio
async def test_get_athlete_not_found(app_with_athletes, mock_service):
    mock_service.get_athlete.return_value = None

    result = await app_with_athletes.call_tool("get_athlete", {"athlete_id": 8})
    data = json.loads(get_tool_result_text(result))

    assert data["error"] == "Athlete 8 not found"
