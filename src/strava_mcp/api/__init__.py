"""
High-Level API — typed services over the Strava SDK.

Each service is bound to one access token; get it with
Service.instance(token) so instances are shared per token.

Modules:
    model      — Dataclasses mirroring Strava JSON
    paging     — One page on request, every page otherwise
    privacy    — Placeholders for records the token may not see
    registry   — One instance per (token, class)
    activities — Activities, comments, kudos, laps, photos, zones
    athletes   — Profiles, KOMs, friends
    clubs      — Clubs, members, membership
    segments   — Segments, starred segments, segment efforts
    auth       — Token exchange and deauthorisation
"""

# Model
from strava_mcp.api.model import (
    Activity,
    ActivityMap,
    ActivityUpdate,
    ActivityZone,
    Athlete,
    Club,
    ClubMembershipResponse,
    Comment,
    Gear,
    Lap,
    Photo,
    Segment,
    SegmentEffort,
    ZoneBucket,
)

# Cross-cutting helpers
from strava_mcp.api.paging import Paging, handle_paging, handle_list_all
from strava_mcp.api.privacy import redact, handle_private_activities, handle_private_segments
from strava_mcp.api.registry import ServiceRegistry, registry

# Services
from strava_mcp.api.activities import ActivityService
from strava_mcp.api.athletes import AthleteService
from strava_mcp.api.clubs import ClubService
from strava_mcp.api.segments import SegmentService, SegmentEffortService

# Auth
from strava_mcp.api.auth import exchange_token, deauthorise

__all__ = [
    # Model
    "Activity", "ActivityMap", "ActivityUpdate", "ActivityZone", "Athlete", "Club",
    "ClubMembershipResponse", "Comment", "Gear", "Lap", "Photo", "Segment",
    "SegmentEffort", "ZoneBucket",
    # Helpers
    "Paging", "handle_paging", "handle_list_all",
    "redact", "handle_private_activities", "handle_private_segments",
    "ServiceRegistry", "registry",
    # Services
    "ActivityService", "AthleteService", "ClubService", "SegmentService", "SegmentEffortService",
    # Auth
    "exchange_token", "deauthorise",
]
