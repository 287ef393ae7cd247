"""
Domain types for the Strava API.

Flat dataclasses whose fields mirror Strava's JSON bodies. from_dict()
tolerates missing keys; to_dict() drops unset fields so the result can be
sent back or handed to the MCP layer as-is.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from strava_mcp.sdk.types import ActivityType, ClubType, Gender, ResourceState, SportType


def parse_datetime(value) -> Optional[datetime]:
    """Parse Strava's ISO-8601 timestamps ("2018-02-16T14:52:54Z")."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_datetime(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


def _parse_enum(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _serialize(value):
    if isinstance(value, _Model):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    return value


class _Model:
    """Shared from_dict/to_dict for the Strava DTOs.

    Subclasses declare which keys hold nested models, timestamps, enums,
    and which *_id fields Strava sends as an embedded {"id": ...} reference.
    """
    _nested: ClassVar[Dict[str, type]] = {}
    _datetimes: ClassVar[tuple] = ()
    _enums: ClassVar[Dict[str, type]] = {}
    _refs: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_dict(cls, d: Optional[dict]):
        if d is None:
            return None
        d = dict(d)
        for id_field, ref_key in cls._refs.items():
            ref = d.get(ref_key)
            if id_field not in d and isinstance(ref, dict):
                d[id_field] = ref.get("id")

        kwargs = {}
        for f in fields(cls):
            if f.name not in d:
                continue
            kwargs[f.name] = cls._convert(f.name, d[f.name])
        return cls(**kwargs)

    @classmethod
    def _convert(cls, name: str, value):
        if value is None:
            return None
        if name == "resource_state":
            return ResourceState.parse(value)
        if name in cls._nested:
            model = cls._nested[name]
            if isinstance(value, list):
                return [model.from_dict(v) for v in value]
            return model.from_dict(value)
        if name in cls._datetimes:
            return parse_datetime(value)
        if name in cls._enums:
            return _parse_enum(cls._enums[name], value)
        return value

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for f in fields(self):
            value = _serialize(getattr(self, f.name))
            if value is not None:
                result[f.name] = value
        return result

    @property
    def is_private_placeholder(self) -> bool:
        return getattr(self, "resource_state", None) == ResourceState.PRIVATE


@dataclass
class Gear(_Model):
    id: Optional[str] = None
    resource_state: Optional[ResourceState] = None
    primary: Optional[bool] = None
    name: Optional[str] = None
    distance: Optional[float] = None


@dataclass
class Club(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    name: Optional[str] = None
    profile_medium: Optional[str] = None
    profile: Optional[str] = None
    description: Optional[str] = None
    club_type: Optional[ClubType] = None
    sport_type: Optional[SportType] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    private: Optional[bool] = None
    member_count: Optional[int] = None

    _enums = {"club_type": ClubType, "sport_type": SportType}


@dataclass
class ClubMembershipResponse(_Model):
    success: Optional[bool] = None
    active: Optional[bool] = None
    membership: Optional[str] = None


@dataclass
class Athlete(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    profile_medium: Optional[str] = None
    profile: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    sex: Optional[Gender] = None
    friend: Optional[str] = None
    follower: Optional[str] = None
    premium: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    follower_count: Optional[int] = None
    friend_count: Optional[int] = None
    measurement_preference: Optional[str] = None
    ftp: Optional[int] = None
    weight: Optional[float] = None
    clubs: Optional[List[Club]] = None
    bikes: Optional[List[Gear]] = None
    shoes: Optional[List[Gear]] = None

    _nested = {"clubs": Club, "bikes": Gear, "shoes": Gear}
    _datetimes = ("created_at", "updated_at")
    _enums = {"sex": Gender}


@dataclass
class ActivityMap(_Model):
    id: Optional[str] = None
    resource_state: Optional[ResourceState] = None
    polyline: Optional[str] = None
    summary_polyline: Optional[str] = None


@dataclass
class Segment(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    name: Optional[str] = None
    activity_type: Optional[ActivityType] = None
    distance: Optional[float] = None
    average_grade: Optional[float] = None
    maximum_grade: Optional[float] = None
    elevation_high: Optional[float] = None
    elevation_low: Optional[float] = None
    start_latlng: Optional[List[float]] = None
    end_latlng: Optional[List[float]] = None
    climb_category: Optional[int] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    private: Optional[bool] = None
    hazardous: Optional[bool] = None
    starred: Optional[bool] = None
    total_elevation_gain: Optional[float] = None
    effort_count: Optional[int] = None
    athlete_count: Optional[int] = None
    star_count: Optional[int] = None

    _enums = {"activity_type": ActivityType}


@dataclass
class SegmentEffort(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    name: Optional[str] = None
    activity_id: Optional[int] = None
    athlete: Optional[Athlete] = None
    elapsed_time: Optional[int] = None
    moving_time: Optional[int] = None
    start_date: Optional[datetime] = None
    start_date_local: Optional[datetime] = None
    distance: Optional[float] = None
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    segment: Optional[Segment] = None
    kom_rank: Optional[int] = None
    pr_rank: Optional[int] = None
    hidden: Optional[bool] = None

    _nested = {"athlete": Athlete, "segment": Segment}
    _datetimes = ("start_date", "start_date_local")
    _refs = {"activity_id": "activity"}


@dataclass
class Activity(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    external_id: Optional[str] = None
    upload_id: Optional[int] = None
    athlete: Optional[Athlete] = None
    name: Optional[str] = None
    description: Optional[str] = None
    distance: Optional[float] = None
    moving_time: Optional[int] = None
    elapsed_time: Optional[int] = None
    total_elevation_gain: Optional[float] = None
    type: Optional[ActivityType] = None
    start_date: Optional[datetime] = None
    start_date_local: Optional[datetime] = None
    timezone: Optional[str] = None
    start_latlng: Optional[List[float]] = None
    end_latlng: Optional[List[float]] = None
    achievement_count: Optional[int] = None
    kudos_count: Optional[int] = None
    comment_count: Optional[int] = None
    athlete_count: Optional[int] = None
    photo_count: Optional[int] = None
    map: Optional[ActivityMap] = None
    trainer: Optional[bool] = None
    commute: Optional[bool] = None
    manual: Optional[bool] = None
    private: Optional[bool] = None
    flagged: Optional[bool] = None
    gear_id: Optional[str] = None
    average_speed: Optional[float] = None
    max_speed: Optional[float] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    kilojoules: Optional[float] = None
    device_watts: Optional[bool] = None
    has_heartrate: Optional[bool] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    calories: Optional[float] = None
    segment_efforts: Optional[List[SegmentEffort]] = None

    _nested = {"athlete": Athlete, "map": ActivityMap, "segment_efforts": SegmentEffort}
    _datetimes = ("start_date", "start_date_local")
    _enums = {"type": ActivityType}


@dataclass
class ActivityUpdate(_Model):
    """Fields accepted by PUT activities/{id}. Unset fields are not sent."""
    name: Optional[str] = None
    type: Optional[ActivityType] = None
    private: Optional[bool] = None
    commute: Optional[bool] = None
    trainer: Optional[bool] = None
    gear_id: Optional[str] = None
    description: Optional[str] = None

    _enums = {"type": ActivityType}


@dataclass
class Comment(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    activity_id: Optional[int] = None
    text: Optional[str] = None
    athlete: Optional[Athlete] = None
    created_at: Optional[datetime] = None

    _nested = {"athlete": Athlete}
    _datetimes = ("created_at",)


@dataclass
class Lap(_Model):
    id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    name: Optional[str] = None
    activity_id: Optional[int] = None
    athlete: Optional[Athlete] = None
    elapsed_time: Optional[int] = None
    moving_time: Optional[int] = None
    start_date: Optional[datetime] = None
    start_date_local: Optional[datetime] = None
    distance: Optional[float] = None
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    total_elevation_gain: Optional[float] = None
    average_speed: Optional[float] = None
    max_speed: Optional[float] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    lap_index: Optional[int] = None

    _nested = {"athlete": Athlete}
    _datetimes = ("start_date", "start_date_local")
    _refs = {"activity_id": "activity"}


@dataclass
class Photo(_Model):
    id: Optional[int] = None
    unique_id: Optional[str] = None
    activity_id: Optional[int] = None
    resource_state: Optional[ResourceState] = None
    ref: Optional[str] = None
    uid: Optional[str] = None
    caption: Optional[str] = None
    type: Optional[str] = None
    source: Optional[int] = None
    uploaded_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    location: Optional[List[float]] = None
    urls: Optional[Dict[str, str]] = None

    _datetimes = ("uploaded_at", "created_at")


@dataclass
class ZoneBucket(_Model):
    min: Optional[float] = None
    max: Optional[float] = None
    time: Optional[int] = None


@dataclass
class ActivityZone(_Model):
    score: Optional[int] = None
    distribution_buckets: List[ZoneBucket] = field(default_factory=list)
    type: Optional[str] = None
    resource_state: Optional[ResourceState] = None
    sensor_based: Optional[bool] = None
    points: Optional[int] = None
    custom_zones: Optional[bool] = None
    max: Optional[int] = None

    _nested = {"distribution_buckets": ZoneBucket}
