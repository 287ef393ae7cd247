"""Tests for api/clubs.py — ClubService."""

from unittest.mock import Mock, patch

import pytest

from strava_mcp.api.clubs import ClubService
from strava_mcp.api.model import Club, ClubMembershipResponse
from strava_mcp.api.paging import Paging
from strava_mcp.sdk.exceptions import NotFoundError, UnauthorizedError
from strava_mcp.sdk.types import ClubType, ResourceState


@pytest.fixture
def read_service(read_token):
    return ClubService(read_token, client=Mock())


@pytest.fixture
def full_service(full_token):
    return ClubService(full_token, client=Mock())


@patch("strava_mcp.api.clubs.sdk_clubs")
class TestGetClub:
    def test_found(self, mock_sdk, read_service):
        mock_sdk.get_club.return_value = {"id": 4, "name": "Team", "club_type": "racing_team"}
        club = read_service.get_club(4)
        assert club.club_type == ClubType.RACING_TEAM

    def test_missing(self, mock_sdk, read_service):
        mock_sdk.get_club.side_effect = NotFoundError("gone", status_code=404)
        assert read_service.get_club(4) is None

    def test_private(self, mock_sdk, read_service):
        mock_sdk.get_club.side_effect = UnauthorizedError("private", status_code=401)
        assert read_service.get_club(4) == Club(id=4, resource_state=ResourceState.PRIVATE)


@patch("strava_mcp.api.clubs.sdk_clubs")
class TestListings:
    def test_my_clubs_null_body(self, mock_sdk, read_service):
        mock_sdk.list_authenticated_athlete_clubs.return_value = None
        assert read_service.list_authenticated_athlete_clubs() == []

    def test_members_of_missing_club(self, mock_sdk, read_service):
        mock_sdk.list_club_members.side_effect = NotFoundError("gone", status_code=404)
        assert read_service.list_club_members(4, Paging()) is None

    def test_members_of_private_club(self, mock_sdk, read_service):
        mock_sdk.list_club_members.side_effect = UnauthorizedError("members only", status_code=403)
        assert read_service.list_all_club_members(4) == []

    def test_members_page(self, mock_sdk, read_service):
        mock_sdk.list_club_members.return_value = [{"firstname": "A"}, {"firstname": "B"}]

        members = read_service.list_club_members(4, Paging(page=3, page_size=2))

        assert [m.firstname for m in members] == ["A", "B"]
        mock_sdk.list_club_members.assert_called_once_with(read_service.client, 4, 3, 2)

    def test_recent_activities_redacted(self, mock_sdk, read_service):
        mock_sdk.list_recent_club_activities.return_value = [
            {"id": 1, "name": "Open", "private": False},
            {"id": 2, "name": "Hidden", "private": True},
        ]

        activities = read_service.list_recent_club_activities(4, Paging())

        assert activities[0].name == "Open"
        assert activities[1].is_private_placeholder

    def test_recent_activities_missing_club(self, mock_sdk, read_service):
        mock_sdk.list_recent_club_activities.side_effect = NotFoundError("gone", status_code=404)
        assert read_service.list_all_recent_club_activities(4) is None


@patch("strava_mcp.api.clubs.sdk_clubs")
class TestMembership:
    def test_join_requires_write_access(self, mock_sdk, read_service):
        with pytest.raises(UnauthorizedError):
            read_service.join_club(4)
        mock_sdk.get_club.assert_not_called()
        mock_sdk.join_club.assert_not_called()

    def test_join_missing_club(self, mock_sdk, full_service):
        mock_sdk.get_club.side_effect = NotFoundError("gone", status_code=404)
        with pytest.raises(NotFoundError):
            full_service.join_club(4)
        mock_sdk.join_club.assert_not_called()

    def test_join(self, mock_sdk, full_service):
        mock_sdk.get_club.return_value = {"id": 4}
        mock_sdk.join_club.return_value = {"success": True, "active": True, "membership": "member"}

        assert full_service.join_club(4) == ClubMembershipResponse(success=True, active=True, membership="member")

    def test_leave(self, mock_sdk, full_service):
        mock_sdk.get_club.return_value = {"id": 4}
        mock_sdk.leave_club.return_value = {"success": True, "active": False}

        response = full_service.leave_club(4)

        assert response.active is False
        mock_sdk.leave_club.assert_called_once_with(full_service.client, 4)
