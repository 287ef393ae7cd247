"""
Segments and segment efforts.
"""

from datetime import datetime
from typing import List, Optional

from strava_mcp.api.model import Segment, SegmentEffort
from strava_mcp.api.paging import Paging, handle_paging
from strava_mcp.api.privacy import (
    handle_private_segments,
    is_inaccessible_segment,
    private_segment,
    private_segment_effort,
)
from strava_mcp.api.service import StravaService, to_models
from strava_mcp.sdk import segments as sdk_segments
from strava_mcp.sdk.exceptions import NotFoundError, UnauthorizedError


class SegmentService(StravaService):
    """Segment endpoints for one token."""

    def get_segment(self, segment_id: int) -> Optional[Segment]:
        try:
            data = sdk_segments.get_segment(self.client, segment_id)
        except NotFoundError:
            return None
        except UnauthorizedError:
            return private_segment(segment_id)
        return Segment.from_dict(data)

    def list_authenticated_athlete_starred_segments(self, paging: Optional[Paging] = None) -> List[Segment]:
        segments = handle_paging(
            paging,
            lambda p: to_models(Segment, sdk_segments.list_authenticated_athlete_starred_segments(
                self.client, p.page, p.page_size,
            )),
        )
        return handle_private_segments(segments, self.token)

    def list_starred_segments(self, athlete_id: int, paging: Optional[Paging] = None) -> Optional[List[Segment]]:
        def fetch(p: Paging):
            try:
                return to_models(Segment, sdk_segments.list_starred_segments(
                    self.client, athlete_id, p.page, p.page_size,
                ))
            except NotFoundError:
                return None

        return handle_private_segments(handle_paging(paging, fetch), self.token)

    def list_segment_efforts(
        self,
        segment_id: int,
        athlete_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        paging: Optional[Paging] = None,
    ) -> Optional[List[SegmentEffort]]:
        """
        Efforts on a segment, optionally for one athlete and a local date range.

        Returns:
            None if the segment does not exist, [] if it is private and
            this token may not see it.

        Raises:
            ValueError: Only one of start / end was given
        """
        if (start is None) != (end is None):
            raise ValueError("start and end must be given together")

        segment = self.get_segment(segment_id)
        if segment is None:
            return None
        if is_inaccessible_segment(segment, self.token):
            return []

        start_local = start.isoformat() if start else None
        end_local = end.isoformat() if end else None

        def fetch(p: Paging):
            try:
                return to_models(SegmentEffort, sdk_segments.list_segment_efforts(
                    self.client, segment_id, athlete_id, start_local, end_local, p.page, p.page_size,
                ))
            except NotFoundError:
                return None

        return handle_paging(paging, fetch)

    def star_segment(self, segment_id: int, starred: bool = True) -> Segment:
        self._require_write_access("star a segment")
        if self.get_segment(segment_id) is None:
            raise NotFoundError(f"Cannot star segment {segment_id}: it does not exist")
        return Segment.from_dict(sdk_segments.star_segment(self.client, segment_id, starred))

    def list_all_authenticated_athlete_starred_segments(self) -> List[Segment]:
        return self.list_authenticated_athlete_starred_segments()

    def list_all_starred_segments(self, athlete_id: int) -> Optional[List[Segment]]:
        return self.list_starred_segments(athlete_id)

    def list_all_segment_efforts(
        self,
        segment_id: int,
        athlete_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Optional[List[SegmentEffort]]:
        return self.list_segment_efforts(segment_id, athlete_id, start, end)


class SegmentEffortService(StravaService):
    """Segment effort endpoints for one token."""

    def get_segment_effort(self, effort_id: int) -> Optional[SegmentEffort]:
        try:
            data = sdk_segments.get_segment_effort(self.client, effort_id)
        except NotFoundError:
            return None
        except UnauthorizedError:
            return private_segment_effort(effort_id)
        return SegmentEffort.from_dict(data)
