"""
Strava segments and segment efforts SDK functions.
"""

from typing import Any, Dict, List, Optional

from strava_mcp.sdk.client import StravaClient, page_params


def get_segment(client: StravaClient, segment_id: int) -> Dict[str, Any]:
    """GET segments/{id}"""
    return client.make_request("GET", f"segments/{segment_id}")


def list_authenticated_athlete_starred_segments(
    client: StravaClient, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET segments/starred"""
    return client.make_request("GET", "segments/starred", params=page_params(page, per_page))


def list_starred_segments(
    client: StravaClient, athlete_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET athletes/{id}/segments/starred"""
    return client.make_request(
        "GET", f"athletes/{athlete_id}/segments/starred", params=page_params(page, per_page),
    )


def star_segment(client: StravaClient, segment_id: int, starred: bool) -> Dict[str, Any]:
    """PUT segments/{id}/starred"""
    return client.make_request(
        "PUT", f"segments/{segment_id}/starred", params={"starred": "true" if starred else "false"},
    )


def list_segment_efforts(
    client: StravaClient,
    segment_id: int,
    athlete_id: Optional[int] = None,
    start_date_local: Optional[str] = None,
    end_date_local: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    GET segments/{id}/all_efforts

    Args:
        start_date_local / end_date_local: ISO-8601 local datetimes; Strava
            ignores one without the other
    """
    params = page_params(page, per_page)
    if athlete_id is not None:
        params["athlete_id"] = athlete_id
    if start_date_local and end_date_local:
        params["start_date_local"] = start_date_local
        params["end_date_local"] = end_date_local
    return client.make_request("GET", f"segments/{segment_id}/all_efforts", params=params)


def get_segment_effort(client: StravaClient, effort_id: int) -> Dict[str, Any]:
    """GET segment_efforts/{id}"""
    return client.make_request("GET", f"segment_efforts/{effort_id}")
