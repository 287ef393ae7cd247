"""
Privacy — placeholders for records this token may not see.

A private record the token cannot read is replaced by a stub carrying only
its id and ResourceState.PRIVATE, so listings keep their length and order.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from strava_mcp.api.model import Activity, Athlete, Club, Segment, SegmentEffort
from strava_mcp.sdk.client import Token
from strava_mcp.sdk.types import ResourceState

logger = logging.getLogger(__name__)

T = TypeVar("T")


def private_activity(activity_id: int) -> Activity:
    return Activity(id=activity_id, resource_state=ResourceState.PRIVATE)


def private_athlete(athlete_id: int) -> Athlete:
    return Athlete(id=athlete_id, resource_state=ResourceState.PRIVATE)


def private_club(club_id: int) -> Club:
    return Club(id=club_id, resource_state=ResourceState.PRIVATE)


def private_segment(segment_id: int) -> Segment:
    return Segment(id=segment_id, resource_state=ResourceState.PRIVATE)


def private_segment_effort(effort_id: int) -> SegmentEffort:
    return SegmentEffort(id=effort_id, resource_state=ResourceState.PRIVATE)


def redact(
    records: Optional[List[T]],
    is_inaccessible: Callable[[T], bool],
    placeholder: Callable[[int], T],
) -> Optional[List[T]]:
    """Replace each inaccessible record with placeholder(record.id)."""
    if records is None:
        return None
    result = []
    for record in records:
        if is_inaccessible(record):
            logger.info(f"Redacting private {type(record).__name__} {record.id}")
            result.append(placeholder(record.id))
        else:
            result.append(record)
    return result


def is_inaccessible_activity(activity: Activity, token: Token) -> bool:
    """Private and either no view_private scope or someone else's activity."""
    if activity.resource_state == ResourceState.PRIVATE:
        return True
    if not activity.private:
        return False
    if not token.has_view_private:
        return True
    owner_id = activity.athlete.id if activity.athlete else None
    return owner_id is not None and token.athlete_id is not None and owner_id != token.athlete_id


def is_inaccessible_segment(segment: Segment, token: Token) -> bool:
    if segment.resource_state == ResourceState.PRIVATE:
        return True
    return bool(segment.private) and not token.has_view_private


def handle_private_activities(activities: Optional[List[Activity]], token: Token) -> Optional[List[Activity]]:
    return redact(activities, lambda a: is_inaccessible_activity(a, token), private_activity)


def handle_private_segments(segments: Optional[List[Segment]], token: Token) -> Optional[List[Segment]]:
    return redact(segments, lambda s: is_inaccessible_segment(s, token), private_segment)
