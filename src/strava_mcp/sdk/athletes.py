"""
Strava athletes SDK functions.
"""

from typing import Any, Dict, List, Optional

from strava_mcp.sdk.client import StravaClient, page_params


def get_authenticated_athlete(client: StravaClient) -> Dict[str, Any]:
    """GET athlete"""
    return client.make_request("GET", "athlete")


def get_athlete(client: StravaClient, athlete_id: int) -> Dict[str, Any]:
    """GET athletes/{id}"""
    return client.make_request("GET", f"athletes/{athlete_id}")


def update_authenticated_athlete(client: StravaClient, fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update the authenticated athlete.

    PUT athlete

    Args:
        fields: Any of city, state, country, sex, weight
    """
    return client.make_request("PUT", "athlete", params=fields)


def list_athlete_koms(
    client: StravaClient, athlete_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET athletes/{id}/koms"""
    return client.make_request("GET", f"athletes/{athlete_id}/koms", params=page_params(page, per_page))


def list_athlete_friends(
    client: StravaClient, athlete_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET athletes/{id}/friends"""
    return client.make_request(
        "GET", f"athletes/{athlete_id}/friends", params=page_params(page, per_page),
    )


def list_authenticated_athlete_friends(
    client: StravaClient, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET athlete/friends"""
    return client.make_request("GET", "athlete/friends", params=page_params(page, per_page))


def list_athletes_both_following(
    client: StravaClient, athlete_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET athletes/{id}/both-following"""
    return client.make_request(
        "GET", f"athletes/{athlete_id}/both-following", params=page_params(page, per_page),
    )
