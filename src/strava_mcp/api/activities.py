"""
Activities — read, create, update, delete; comments, kudos, laps, photos, zones.

Missing activities read as None. An activity this token may not see reads
as a private placeholder, and its children as an empty list. Writes check
scope and target before calling Strava.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from strava_mcp.api.model import (
    Activity,
    ActivityUpdate,
    ActivityZone,
    Athlete,
    Comment,
    Lap,
    Photo,
)
from strava_mcp.api.paging import Paging, handle_paging
from strava_mcp.api.privacy import handle_private_activities, private_activity
from strava_mcp.api.service import StravaService, epoch_seconds, to_models
from strava_mcp.sdk import activities as sdk_activities
from strava_mcp.sdk.exceptions import (
    BadRequestError,
    NotFoundError,
    StravaInternalServerError,
    UnauthorizedError,
)
from strava_mcp.sdk.types import ResourceState

logger = logging.getLogger(__name__)

# Fields POST activities accepts
CREATE_FIELDS = (
    "name", "type", "start_date_local", "elapsed_time", "description",
    "distance", "private", "trainer", "commute",
)


class ActivityService(StravaService):
    """Activity endpoints for one token."""

    def get_activity(self, activity_id: int, include_all_efforts: bool = False) -> Optional[Activity]:
        """
        Get an activity.

        Returns:
            The activity, None if it does not exist, or a private
            placeholder if this token may not see it.
        """
        try:
            data = sdk_activities.get_activity(self.client, activity_id, include_all_efforts)
        except NotFoundError:
            return None
        except UnauthorizedError:
            return private_activity(activity_id)
        return Activity.from_dict(data)

    def create_manual_activity(self, activity: Activity) -> Activity:
        """
        Create a manually entered activity.

        Raises:
            UnauthorizedError: Token lacks write access, or the activity is
                private and the token lacks view_private
            ValueError: Strava rejected the activity
        """
        self._require_write_access("create an activity")
        if activity.private and not self.token.has_view_private:
            raise UnauthorizedError("Cannot create a private activity without view_private access")

        payload = {k: v for k, v in activity.to_dict().items() if k in CREATE_FIELDS}
        try:
            data = sdk_activities.create_activity(self.client, payload)
        except (BadRequestError, StravaInternalServerError) as e:
            # Strava answers 500 rather than 400 for some invalid payloads
            raise ValueError(f"Invalid activity: {e.message}") from e
        return Activity.from_dict(data)

    def update_activity(self, activity_id: int, update: Optional[ActivityUpdate]) -> Optional[Activity]:
        """
        Update an activity.

        With no update this is just get_activity(). A response that is empty
        or does not yet carry the sent values is marked UPDATING and the
        activity is read again.

        Raises:
            UnauthorizedError: No write access, or the activity is private
            NotFoundError: The activity does not exist
        """
        if update is None:
            return self.get_activity(activity_id)

        self._require_write_access("update an activity")
        self._get_accessible_activity(activity_id, "update")

        sent = update.to_dict()
        try:
            data = sdk_activities.update_activity(self.client, activity_id, sent)
        except NotFoundError:
            return None

        activity = Activity.from_dict(data) or Activity(id=activity_id)
        if not _shows_update(activity, sent):
            activity.resource_state = ResourceState.UPDATING
        if activity.resource_state == ResourceState.UPDATING:
            logger.info(f"Activity {activity_id} does not show the update yet; reading it again")
            activity = self.get_activity(activity_id)
        return activity

    def delete_activity(self, activity_id: int) -> Optional[Activity]:
        """
        Delete an activity.

        Returns:
            The activity as it was before deletion, or None if Strava
            reports it gone by the time of the delete.
        """
        self._require_write_access("delete an activity")
        activity = self._get_accessible_activity(activity_id, "delete")

        try:
            sdk_activities.delete_activity(self.client, activity_id)
        except NotFoundError:
            return None
        return activity

    def create_comment(self, activity_id: int, text: str) -> Comment:
        if not text:
            raise ValueError("Comment text cannot be empty")
        self._require_write_access("comment on an activity")
        self._get_accessible_activity(activity_id, "comment on")

        data = sdk_activities.create_comment(self.client, activity_id, text)
        return Comment.from_dict(data)

    def delete_comment(self, activity_id: Union[int, Comment], comment_id: int = None) -> None:
        """Delete a comment, given either (activity_id, comment_id) or a Comment."""
        if isinstance(activity_id, Comment):
            activity_id, comment_id = activity_id.activity_id, activity_id.id

        self._require_write_access("delete a comment")
        self._get_accessible_activity(activity_id, "delete a comment on")

        sdk_activities.delete_comment(self.client, activity_id, comment_id)

    def give_kudos(self, activity_id: int) -> None:
        self._require_write_access("give kudos")

        activity = self.get_activity(activity_id)
        if activity is None:
            raise NotFoundError(f"Cannot give kudos: activity {activity_id} does not exist")
        if activity.resource_state == ResourceState.PRIVATE and not self.token.has_view_private:
            raise UnauthorizedError(f"Cannot give kudos to private activity {activity_id} without view_private access")

        sdk_activities.give_kudos(self.client, activity_id)

    # ── Activity children ───────────────────────────────────────────────

    def list_activity_comments(
        self, activity_id: int, markdown: bool = False, paging: Optional[Paging] = None,
    ) -> Optional[List[Comment]]:
        return self._list_for_activity(activity_id, lambda: handle_paging(
            paging,
            lambda p: to_models(Comment, sdk_activities.list_activity_comments(
                self.client, activity_id, markdown, p.page, p.page_size,
            )),
        ))

    def list_activity_kudoers(self, activity_id: int, paging: Optional[Paging] = None) -> Optional[List[Athlete]]:
        return self._list_for_activity(activity_id, lambda: handle_paging(
            paging,
            lambda p: to_models(Athlete, sdk_activities.list_activity_kudoers(
                self.client, activity_id, p.page, p.page_size,
            )),
        ))

    def list_activity_laps(self, activity_id: int) -> Optional[List[Lap]]:
        return self._list_for_activity(
            activity_id, lambda: to_models(Lap, sdk_activities.list_activity_laps(self.client, activity_id)),
        )

    def list_activity_photos(self, activity_id: int) -> Optional[List[Photo]]:
        return self._list_for_activity(
            activity_id, lambda: to_models(Photo, sdk_activities.list_activity_photos(self.client, activity_id)),
        )

    def list_activity_zones(self, activity_id: int) -> Optional[List[ActivityZone]]:
        return self._list_for_activity(
            activity_id, lambda: to_models(ActivityZone, sdk_activities.list_activity_zones(self.client, activity_id)),
        )

    # ── Activity listings ───────────────────────────────────────────────

    def list_authenticated_athlete_activities(
        self,
        before: Optional[datetime] = None,
        after: Optional[datetime] = None,
        paging: Optional[Paging] = None,
    ) -> List[Activity]:
        seconds_before = epoch_seconds(before)
        seconds_after = epoch_seconds(after)
        activities = handle_paging(
            paging,
            lambda p: to_models(Activity, sdk_activities.list_athlete_activities(
                self.client, seconds_before, seconds_after, p.page, p.page_size,
            )),
        )
        return handle_private_activities(activities, self.token)

    def list_friends_activities(self, paging: Optional[Paging] = None) -> List[Activity]:
        activities = handle_paging(
            paging,
            lambda p: to_models(Activity, sdk_activities.list_friends_activities(
                self.client, p.page, p.page_size,
            )),
        )
        return handle_private_activities(activities, self.token)

    def list_related_activities(self, activity_id: int, paging: Optional[Paging] = None) -> Optional[List[Activity]]:
        def fetch(p: Paging):
            try:
                return to_models(Activity, sdk_activities.list_related_activities(
                    self.client, activity_id, p.page, p.page_size,
                ))
            except NotFoundError:
                return None

        return handle_private_activities(handle_paging(paging, fetch), self.token)

    # ── Fetch-everything shorthands ─────────────────────────────────────

    def list_all_activity_comments(self, activity_id: int) -> Optional[List[Comment]]:
        return self.list_activity_comments(activity_id)

    def list_all_activity_kudoers(self, activity_id: int) -> Optional[List[Athlete]]:
        return self.list_activity_kudoers(activity_id)

    def list_all_authenticated_athlete_activities(
        self, before: Optional[datetime] = None, after: Optional[datetime] = None,
    ) -> List[Activity]:
        return self.list_authenticated_athlete_activities(before, after)

    def list_all_friends_activities(self) -> List[Activity]:
        return self.list_friends_activities()

    def list_all_related_activities(self, activity_id: int) -> Optional[List[Activity]]:
        return self.list_related_activities(activity_id)

    # ── Helpers ─────────────────────────────────────────────────────────

    def _get_accessible_activity(self, activity_id: int, action: str) -> Activity:
        activity = self.get_activity(activity_id)
        if activity is None:
            raise NotFoundError(f"Cannot {action} activity {activity_id}: it does not exist")
        if activity.resource_state == ResourceState.PRIVATE:
            raise UnauthorizedError(f"Cannot {action} private activity {activity_id}")
        return activity

    def _list_for_activity(self, activity_id: int, fetch: Callable[[], Optional[list]]) -> Optional[list]:
        activity = self.get_activity(activity_id)
        if activity is None:
            return None
        if activity.resource_state == ResourceState.PRIVATE:
            logger.info(f"Activity {activity_id} is private; returning no children")
            return []
        try:
            return fetch()
        except NotFoundError:
            return None


def _shows_update(activity: Activity, sent: dict) -> bool:
    current = activity.to_dict()
    return all(current.get(k) == v for k, v in sent.items())
