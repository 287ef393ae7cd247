"""
Clubs — club details, members, recent activity, membership.

Strava refuses member and activity listings of a private club to
non-members; those read as an empty list.
"""

import logging
from typing import List, Optional

from strava_mcp.api.model import Activity, Athlete, Club, ClubMembershipResponse
from strava_mcp.api.paging import Paging, handle_paging
from strava_mcp.api.privacy import handle_private_activities, private_club
from strava_mcp.api.service import StravaService, to_models
from strava_mcp.sdk import clubs as sdk_clubs
from strava_mcp.sdk.exceptions import NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


class ClubService(StravaService):
    """Club endpoints for one token."""

    def get_club(self, club_id: int) -> Optional[Club]:
        try:
            data = sdk_clubs.get_club(self.client, club_id)
        except NotFoundError:
            return None
        except UnauthorizedError:
            return private_club(club_id)
        return Club.from_dict(data)

    def list_authenticated_athlete_clubs(self) -> List[Club]:
        return to_models(Club, sdk_clubs.list_authenticated_athlete_clubs(self.client))

    def list_club_members(self, club_id: int, paging: Optional[Paging] = None) -> Optional[List[Athlete]]:
        def fetch(p: Paging):
            return to_models(Athlete, sdk_clubs.list_club_members(self.client, club_id, p.page, p.page_size))

        return self._list_for_club(club_id, paging, fetch)

    def list_recent_club_activities(self, club_id: int, paging: Optional[Paging] = None) -> Optional[List[Activity]]:
        def fetch(p: Paging):
            return to_models(Activity, sdk_clubs.list_recent_club_activities(
                self.client, club_id, p.page, p.page_size,
            ))

        return handle_private_activities(self._list_for_club(club_id, paging, fetch), self.token)

    def join_club(self, club_id: int) -> ClubMembershipResponse:
        self._require_write_access("join a club")
        self._require_club(club_id, "join")
        return ClubMembershipResponse.from_dict(sdk_clubs.join_club(self.client, club_id))

    def leave_club(self, club_id: int) -> ClubMembershipResponse:
        self._require_write_access("leave a club")
        self._require_club(club_id, "leave")
        return ClubMembershipResponse.from_dict(sdk_clubs.leave_club(self.client, club_id))

    def list_all_club_members(self, club_id: int) -> Optional[List[Athlete]]:
        return self.list_club_members(club_id)

    def list_all_recent_club_activities(self, club_id: int) -> Optional[List[Activity]]:
        return self.list_recent_club_activities(club_id)

    def _require_club(self, club_id: int, action: str) -> None:
        if self.get_club(club_id) is None:
            raise NotFoundError(f"Cannot {action} club {club_id}: it does not exist")

    def _list_for_club(self, club_id: int, paging: Optional[Paging], fetch) -> Optional[list]:
        try:
            return handle_paging(paging, fetch)
        except NotFoundError:
            return None
        except UnauthorizedError:
            logger.info(f"Club {club_id} is private and the athlete is not a member")
            return []
