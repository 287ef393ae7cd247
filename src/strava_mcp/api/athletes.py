"""
Athletes — profiles, KOMs, friends.
"""

from typing import List, Optional

from strava_mcp.api.model import Athlete, SegmentEffort
from strava_mcp.api.paging import Paging, handle_paging
from strava_mcp.api.privacy import private_athlete
from strava_mcp.api.service import StravaService, to_models
from strava_mcp.sdk import athletes as sdk_athletes
from strava_mcp.sdk.exceptions import NotFoundError, UnauthorizedError
from strava_mcp.sdk.types import Gender


class AthleteService(StravaService):
    """Athlete endpoints for one token."""

    def get_authenticated_athlete(self) -> Athlete:
        return Athlete.from_dict(sdk_athletes.get_authenticated_athlete(self.client))

    def get_athlete(self, athlete_id: int) -> Optional[Athlete]:
        """None if the athlete does not exist, a placeholder if hidden."""
        try:
            data = sdk_athletes.get_athlete(self.client, athlete_id)
        except NotFoundError:
            return None
        except UnauthorizedError:
            return private_athlete(athlete_id)
        return Athlete.from_dict(data)

    def update_authenticated_athlete(
        self,
        city: str = None,
        state: str = None,
        country: str = None,
        sex: Gender = None,
        weight: float = None,
    ) -> Athlete:
        """Update the authenticated athlete. Only the given fields are sent."""
        self._require_write_access("update the athlete")

        fields = {
            "city": city,
            "state": state,
            "country": country,
            "sex": sex.value if isinstance(sex, Gender) else sex,
            "weight": weight,
        }
        fields = {k: v for k, v in fields.items() if v is not None}
        return Athlete.from_dict(sdk_athletes.update_authenticated_athlete(self.client, fields))

    def list_athlete_koms(self, athlete_id: int, paging: Optional[Paging] = None) -> Optional[List[SegmentEffort]]:
        def fetch(p: Paging):
            try:
                return to_models(SegmentEffort, sdk_athletes.list_athlete_koms(
                    self.client, athlete_id, p.page, p.page_size,
                ))
            except NotFoundError:
                return None

        return handle_paging(paging, fetch)

    def list_athlete_friends(self, athlete_id: int, paging: Optional[Paging] = None) -> Optional[List[Athlete]]:
        def fetch(p: Paging):
            try:
                return to_models(Athlete, sdk_athletes.list_athlete_friends(
                    self.client, athlete_id, p.page, p.page_size,
                ))
            except NotFoundError:
                return None

        return handle_paging(paging, fetch)

    def list_authenticated_athlete_friends(self, paging: Optional[Paging] = None) -> List[Athlete]:
        return handle_paging(
            paging,
            lambda p: to_models(Athlete, sdk_athletes.list_authenticated_athlete_friends(
                self.client, p.page, p.page_size,
            )),
        )

    def list_athletes_both_following(
        self, athlete_id: int, paging: Optional[Paging] = None,
    ) -> Optional[List[Athlete]]:
        """Athletes both the authenticated athlete and athlete_id follow."""
        def fetch(p: Paging):
            try:
                return to_models(Athlete, sdk_athletes.list_athletes_both_following(
                    self.client, athlete_id, p.page, p.page_size,
                ))
            except NotFoundError:
                return None

        return handle_paging(paging, fetch)

    def list_all_athlete_koms(self, athlete_id: int) -> Optional[List[SegmentEffort]]:
        return self.list_athlete_koms(athlete_id)

    def list_all_athlete_friends(self, athlete_id: int) -> Optional[List[Athlete]]:
        return self.list_athlete_friends(athlete_id)

    def list_all_authenticated_athlete_friends(self) -> List[Athlete]:
        return self.list_authenticated_athlete_friends()

    def list_all_athletes_both_following(self, athlete_id: int) -> Optional[List[Athlete]]:
        return self.list_athletes_both_following(athlete_id)
