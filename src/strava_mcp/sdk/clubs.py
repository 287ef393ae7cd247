"""
Strava clubs SDK functions.
"""

from typing import Any, Dict, List, Optional

from strava_mcp.sdk.client import StravaClient, page_params


def get_club(client: StravaClient, club_id: int) -> Dict[str, Any]:
    """GET clubs/{id}"""
    return client.make_request("GET", f"clubs/{club_id}")


def list_authenticated_athlete_clubs(client: StravaClient) -> List[Dict[str, Any]]:
    """GET athlete/clubs"""
    return client.make_request("GET", "athlete/clubs")


def list_club_members(
    client: StravaClient, club_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET clubs/{id}/members"""
    return client.make_request("GET", f"clubs/{club_id}/members", params=page_params(page, per_page))


def list_recent_club_activities(
    client: StravaClient, club_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET clubs/{id}/activities"""
    return client.make_request(
        "GET", f"clubs/{club_id}/activities", params=page_params(page, per_page),
    )


def join_club(client: StravaClient, club_id: int) -> Dict[str, Any]:
    """
    POST clubs/{id}/join

    Returns:
        {success, active, membership}
    """
    return client.make_request("POST", f"clubs/{club_id}/join")


def leave_club(client: StravaClient, club_id: int) -> Dict[str, Any]:
    """
    POST clubs/{id}/leave

    Returns:
        {success, active}
    """
    return client.make_request("POST", f"clubs/{club_id}/leave")
