"""
Shared utility functions for the Strava MCP server.

JSON rendering and formatting helpers used across tool modules.
"""

import json
from typing import List, Optional

from strava_mcp.api.paging import Paging


def dump_model(model, missing_message: str) -> str:
    """Render a model as JSON, or an error object if it is None."""
    if model is None:
        return json.dumps({"error": missing_message}, indent=2)
    return json.dumps(model.to_dict(), indent=2)


def dump_list(items: Optional[list], key: str, missing_message: str) -> str:
    """Render a list of models as {"count", key: [...]}, or an error object if None."""
    if items is None:
        return json.dumps({"error": missing_message}, indent=2)
    return json.dumps({"count": len(items), key: [i.to_dict() for i in items]}, indent=2)


def paging_for(page: int, size: int) -> Optional[Paging]:
    """Tool page/size arguments to a paging instruction; page=0 means all pages."""
    if not page:
        return None
    return Paging(page=page, page_size=size)


def format_duration(seconds: int) -> str:
    """Format seconds into human-readable duration.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string like "1h01m01s" or "25m30s"
    """
    if not seconds or seconds <= 0:
        return "0s"
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h > 0:
        return f"{h}h{m:02d}m{s:02d}s"
    if m > 0:
        return f"{m}m{s:02d}s"
    return f"{s}s"


def format_distance(meters: float) -> str:
    """Format distance in meters, e.g. "10.0 km" or "800 m"."""
    if not meters or meters <= 0:
        return "0 m"
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{int(meters)} m"


def summarize_activities(activities: List) -> List[dict]:
    """One compact row per activity; private placeholders keep only id and state."""
    rows = []
    for a in activities:
        if a.is_private_placeholder:
            rows.append({"id": a.id, "private": True})
            continue
        rows.append(_clean_nones({
            "id": a.id,
            "name": a.name,
            "type": a.type.value if hasattr(a.type, "value") else a.type,
            "start_date": a.start_date_local.date().isoformat() if a.start_date_local else None,
            "distance": format_distance(a.distance or 0),
            "moving_time": format_duration(a.moving_time or 0),
            "kudos": a.kudos_count,
            "private": a.private,
        }))
    return rows


def _clean_nones(d):
    """Recursively remove None values from a dict."""
    if isinstance(d, dict):
        return {k: _clean_nones(v) for k, v in d.items() if v is not None}
    if isinstance(d, list):
        return [_clean_nones(i) for i in d]
    return d
