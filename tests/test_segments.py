"""
Tests for Strava MCP segment tools.
"""
import json

import pytest
from mcp.server.fastmcp import FastMCP

from strava_mcp import segments
from strava_mcp.api.model import Segment, SegmentEffort
from strava_mcp.api.privacy import private_segment
from strava_mcp.api.segments import SegmentEffortService, SegmentService
from strava_mcp.sdk.types import ActivityType
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_segments():
    """Create FastMCP app with segment tools registered."""
    app = FastMCP("Test Strava Segments")
    app = segments.register_tools(app)
    return app


@pytest.mark.asyncio
async def test_get_segment(app_with_segments, mock_service, mock_get_service):
    mock_service.get_segment.return_value = Segment(id=6, name="Hawk Hill", activity_type=ActivityType.RIDE)

    result = await app_with_segments.call_tool("get_segment", {"segment_id": 6})
    data = json.loads(get_tool_result_text(result))

    assert data == {"id": 6, "name": "Hawk Hill", "activity_type": "Ride"}
    assert mock_get_service.call_args[0][1] is SegmentService


@pytest.mark.asyncio
async def test_list_starred_segments(app_with_segments, mock_service):
    mock_service.list_authenticated_athlete_starred_segments.return_value = [
        Segment(id=1, name="Open"), private_segment(2),
    ]

    result = await app_with_segments.call_tool("list_starred_segments", {})
    data = json.loads(get_tool_result_text(result))

    assert data["count"] == 2
    assert data["segments"][1] == {"id": 2, "resource_state": 100}
    mock_service.list_authenticated_athlete_starred_segments.assert_called_once_with(None)


@pytest.mark.asyncio
async def test_get_segment_effort(app_with_segments, mock_service, mock_get_service):
    mock_service.get_segment_effort.return_value = SegmentEffort(id=77, activity_id=5, elapsed_time=300)

    result = await app_with_segments.call_tool("get_segment_effort", {"effort_id": 77})
    data = json.loads(get_tool_result_text(result))

    assert data == {"id": 77, "activity_id": 5, "elapsed_time": 300}
    assert mock_get_service.call_args[0][1] is SegmentEffortService


@pytest.mark.asyncio
async def test_get_segment_effort_not_found(app_with_segments, mock_service):
    mock_service.get_segment_effort.return_value = None

    result = await app_with_segments.call_tool("get_segment_effort", {"effort_id": 77})
    data = json.loads(get_tool_result_text(result))

    assert "not found" in data["error"]
