"""Tests for api/segments.py — SegmentService and SegmentEffortService."""

from datetime import datetime
from unittest.mock import Mock, patch

import pytest

from strava_mcp.api.model import Segment, SegmentEffort
from strava_mcp.api.paging import Paging
from strava_mcp.api.segments import SegmentEffortService, SegmentService
from strava_mcp.sdk.exceptions import NotFoundError, UnauthorizedError
from strava_mcp.sdk.types import ActivityType, ResourceState


@pytest.fixture
def read_service(read_token):
    return SegmentService(read_token, client=Mock())


@pytest.fixture
def full_service(full_token):
    return SegmentService(full_token, client=Mock())


@patch("strava_mcp.api.segments.sdk_segments")
class TestGetSegment:
    def test_found(self, mock_sdk, read_service):
        mock_sdk.get_segment.return_value = {"id": 6, "name": "Hawk Hill", "activity_type": "Ride"}
        segment = read_service.get_segment(6)
        assert segment.activity_type == ActivityType.RIDE

    def test_missing(self, mock_sdk, read_service):
        mock_sdk.get_segment.side_effect = NotFoundError("gone", status_code=404)
        assert read_service.get_segment(6) is None

    def test_private(self, mock_sdk, read_service):
        mock_sdk.get_segment.side_effect = UnauthorizedError("private", status_code=401)
        assert read_service.get_segment(6) == Segment(id=6, resource_state=ResourceState.PRIVATE)


@patch("strava_mcp.api.segments.sdk_segments")
class TestStarred:
    def test_private_segments_redacted_without_view_private(self, mock_sdk, read_service):
        mock_sdk.list_authenticated_athlete_starred_segments.return_value = [
            {"id": 1, "name": "Open", "private": False},
            {"id": 2, "name": "Mine", "private": True},
        ]

        segments = read_service.list_authenticated_athlete_starred_segments(Paging())

        assert segments[0].name == "Open"
        assert segments[1] == Segment(id=2, resource_state=ResourceState.PRIVATE)

    def test_private_segments_kept_with_view_private(self, mock_sdk, full_service):
        mock_sdk.list_authenticated_athlete_starred_segments.return_value = [
            {"id": 2, "name": "Mine", "private": True},
        ]
        assert full_service.list_all_authenticated_athlete_starred_segments()[0].name == "Mine"

    def test_starred_for_missing_athlete(self, mock_sdk, read_service):
        mock_sdk.list_starred_segments.side_effect = NotFoundError("gone", status_code=404)
        assert read_service.list_all_starred_segments(8) is None


@patch("strava_mcp.api.segments.sdk_segments")
class TestEfforts:
    def test_lone_start_is_rejected(self, mock_sdk, read_service):
        with pytest.raises(ValueError):
            read_service.list_segment_efforts(6, start=datetime(2024, 1, 1))
        mock_sdk.get_segment.assert_not_called()

    def test_missing_segment(self, mock_sdk, read_service):
        mock_sdk.get_segment.side_effect = NotFoundError("gone", status_code=404)
        assert read_service.list_segment_efforts(6) is None
        mock_sdk.list_segment_efforts.assert_not_called()

    def test_private_segment_without_view_private(self, mock_sdk, read_service):
        mock_sdk.get_segment.return_value = {"id": 6, "private": True}
        assert read_service.list_segment_efforts(6) == []
        mock_sdk.list_segment_efforts.assert_not_called()

    def test_date_range_sent_as_local_iso(self, mock_sdk, read_service):
        mock_sdk.get_segment.return_value = {"id": 6, "private": False}
        mock_sdk.list_segment_efforts.return_value = [{"id": 1, "elapsed_time": 300}]

        efforts = read_service.list_segment_efforts(
            6, athlete_id=3,
            start=datetime(2024, 1, 1), end=datetime(2024, 2, 1),
            paging=Paging(page=1, page_size=50),
        )

        assert efforts == [SegmentEffort(id=1, elapsed_time=300)]
        mock_sdk.list_segment_efforts.assert_called_once_with(
            read_service.client, 6, 3, "2024-01-01T00:00:00", "2024-02-01T00:00:00", 1, 50,
        )


@patch("strava_mcp.api.segments.sdk_segments")
class TestStarSegment:
    def test_requires_write_access(self, mock_sdk, read_service):
        with pytest.raises(UnauthorizedError):
            read_service.star_segment(6)
        mock_sdk.get_segment.assert_not_called()
        mock_sdk.star_segment.assert_not_called()

    def test_missing_segment(self, mock_sdk, full_service):
        mock_sdk.get_segment.side_effect = NotFoundError("gone", status_code=404)
        with pytest.raises(NotFoundError):
            full_service.star_segment(6)
        mock_sdk.star_segment.assert_not_called()

    def test_unstar(self, mock_sdk, full_service):
        mock_sdk.get_segment.return_value = {"id": 6}
        mock_sdk.star_segment.return_value = {"id": 6, "starred": False}

        assert full_service.star_segment(6, starred=False).starred is False
        mock_sdk.star_segment.assert_called_once_with(full_service.client, 6, False)


@patch("strava_mcp.api.segments.sdk_segments")
class TestSegmentEfforts:
    def test_found(self, mock_sdk, read_token):
        mock_sdk.get_segment_effort.return_value = {"id": 77, "activity": {"id": 5}, "kom_rank": 1}

        effort = SegmentEffortService(read_token, client=Mock()).get_segment_effort(77)

        assert effort.activity_id == 5
        assert effort.kom_rank == 1

    def test_missing(self, mock_sdk, read_token):
        mock_sdk.get_segment_effort.side_effect = NotFoundError("gone", status_code=404)
        assert SegmentEffortService(read_token, client=Mock()).get_segment_effort(77) is None

    def test_private(self, mock_sdk, read_token):
        mock_sdk.get_segment_effort.side_effect = UnauthorizedError("private", status_code=401)
        effort = SegmentEffortService(read_token, client=Mock()).get_segment_effort(77)
        assert effort.is_private_placeholder
