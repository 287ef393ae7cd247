"""
Strava activities SDK functions.

Each function maps 1:1 to an endpoint and returns the decoded JSON body.
"""

from typing import Any, Dict, List, Optional

from strava_mcp.sdk.client import StravaClient, page_params


def get_activity(client: StravaClient, activity_id: int, include_all_efforts: bool = False) -> Dict[str, Any]:
    """
    Get a single activity.

    GET activities/{id}
    """
    params = {"include_all_efforts": "true"} if include_all_efforts else None
    return client.make_request("GET", f"activities/{activity_id}", params=params)


def create_activity(client: StravaClient, activity: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a manual activity.

    POST activities
    """
    return client.make_request("POST", "activities", json_data=activity)


def update_activity(client: StravaClient, activity_id: int, update: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update an activity.

    PUT activities/{id}
    """
    return client.make_request("PUT", f"activities/{activity_id}", json_data=update)


def delete_activity(client: StravaClient, activity_id: int) -> None:
    """
    Delete an activity.

    DELETE activities/{id}
    """
    client.make_request("DELETE", f"activities/{activity_id}")


def list_athlete_activities(
    client: StravaClient,
    before: Optional[int] = None,
    after: Optional[int] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List the authenticated athlete's activities.

    GET athlete/activities

    Args:
        before: Epoch seconds; only activities that started before this
        after: Epoch seconds; only activities that started after this
    """
    params = page_params(page, per_page)
    if before is not None:
        params["before"] = before
    if after is not None:
        params["after"] = after
    return client.make_request("GET", "athlete/activities", params=params)


def list_friends_activities(
    client: StravaClient, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET activities/following"""
    return client.make_request("GET", "activities/following", params=page_params(page, per_page))


def list_related_activities(
    client: StravaClient, activity_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET activities/{id}/related"""
    return client.make_request(
        "GET", f"activities/{activity_id}/related", params=page_params(page, per_page),
    )


def list_activity_comments(
    client: StravaClient,
    activity_id: int,
    markdown: bool = False,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET activities/{id}/comments"""
    params = page_params(page, per_page)
    if markdown:
        params["markdown"] = "true"
    return client.make_request("GET", f"activities/{activity_id}/comments", params=params)


def create_comment(client: StravaClient, activity_id: int, text: str) -> Dict[str, Any]:
    """POST activities/{id}/comments"""
    return client.make_request(
        "POST", f"activities/{activity_id}/comments", params={"text": text},
    )


def delete_comment(client: StravaClient, activity_id: int, comment_id: int) -> None:
    """DELETE activities/{id}/comments/{comment_id}"""
    client.make_request("DELETE", f"activities/{activity_id}/comments/{comment_id}")


def list_activity_kudoers(
    client: StravaClient, activity_id: int, page: Optional[int] = None, per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """GET activities/{id}/kudos"""
    return client.make_request(
        "GET", f"activities/{activity_id}/kudos", params=page_params(page, per_page),
    )


def give_kudos(client: StravaClient, activity_id: int) -> None:
    """POST activities/{id}/kudos"""
    client.make_request("POST", f"activities/{activity_id}/kudos")


def list_activity_laps(client: StravaClient, activity_id: int) -> List[Dict[str, Any]]:
    """GET activities/{id}/laps"""
    return client.make_request("GET", f"activities/{activity_id}/laps")


def list_activity_photos(client: StravaClient, activity_id: int) -> Optional[List[Dict[str, Any]]]:
    """
    GET activities/{id}/photos

    Strava answers null rather than [] for an activity without photos.
    """
    return client.make_request(
        "GET", f"activities/{activity_id}/photos", params={"photo_sources": "true"},
    )


def list_activity_zones(client: StravaClient, activity_id: int) -> List[Dict[str, Any]]:
    """GET activities/{id}/zones"""
    return client.make_request("GET", f"activities/{activity_id}/zones")
