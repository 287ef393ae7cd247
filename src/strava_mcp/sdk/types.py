"""
Strava API types, enums, and constants.

All Strava-specific codes, mappings, and magic values live here.
"""

from enum import Enum, IntEnum


class ResourceState(IntEnum):
    """Level of detail of a returned record.

    META, SUMMARY and DETAILED come from the service. PRIVATE and UPDATING
    are local markers: PRIVATE flags a record this token may not see in full,
    UPDATING flags an update response that is empty or does not yet carry
    the values sent; ActivityService.update_activity sets it and reads the
    activity again.
    """
    UNKNOWN = -1
    META = 1
    SUMMARY = 2
    DETAILED = 3
    PRIVATE = 100
    UPDATING = 101

    @classmethod
    def parse(cls, value) -> "ResourceState":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class AuthorisationScope(Enum):
    """OAuth scopes a token may have been granted."""
    VIEW_PRIVATE = "view_private"
    WRITE = "write"
    READ = "read"
    READ_ALL = "read_all"
    PROFILE_READ_ALL = "profile:read_all"
    PROFILE_WRITE = "profile:write"
    ACTIVITY_READ = "activity:read"
    ACTIVITY_READ_ALL = "activity:read_all"
    ACTIVITY_WRITE = "activity:write"


# Scopes that allow writes / reading private data
WRITE_SCOPES = {
    AuthorisationScope.WRITE,
    AuthorisationScope.ACTIVITY_WRITE,
    AuthorisationScope.PROFILE_WRITE,
}
VIEW_PRIVATE_SCOPES = {
    AuthorisationScope.VIEW_PRIVATE,
    AuthorisationScope.ACTIVITY_READ_ALL,
    AuthorisationScope.READ_ALL,
}


class ActivityType(Enum):
    """Activity type names (activity.type)."""
    RIDE = "Ride"
    RUN = "Run"
    SWIM = "Swim"
    HIKE = "Hike"
    WALK = "Walk"
    ALPINE_SKI = "AlpineSki"
    BACKCOUNTRY_SKI = "BackcountrySki"
    CANOEING = "Canoeing"
    CROSSFIT = "Crossfit"
    E_BIKE_RIDE = "EBikeRide"
    ELLIPTICAL = "Elliptical"
    ICE_SKATE = "IceSkate"
    INLINE_SKATE = "InlineSkate"
    KAYAKING = "Kayaking"
    KITESURF = "Kitesurf"
    NORDIC_SKI = "NordicSki"
    ROCK_CLIMBING = "RockClimbing"
    ROLLER_SKI = "RollerSki"
    ROWING = "Rowing"
    SNOWBOARD = "Snowboard"
    SNOWSHOE = "Snowshoe"
    STAIR_STEPPER = "StairStepper"
    STAND_UP_PADDLING = "StandUpPaddling"
    SURFING = "Surfing"
    VIRTUAL_RIDE = "VirtualRide"
    WEIGHT_TRAINING = "WeightTraining"
    WINDSURF = "Windsurf"
    WHEELCHAIR = "Wheelchair"
    WORKOUT = "Workout"
    YOGA = "Yoga"


class ClubType(Enum):
    """Club type (club.club_type)."""
    CASUAL_CLUB = "casual_club"
    RACING_TEAM = "racing_team"
    SHOP = "shop"
    COMPANY = "company"
    OTHER = "other"


class SportType(Enum):
    """Club sport type (club.sport_type)."""
    CYCLING = "cycling"
    RUNNING = "running"
    TRIATHLON = "triathlon"
    OTHER = "other"


class Gender(Enum):
    """Athlete sex as reported by Strava."""
    MALE = "M"
    FEMALE = "F"


class MeasurementMethod(Enum):
    """Athlete measurement preference."""
    METRIC = "meters"
    IMPERIAL = "feet"


# Strava's hard limit on per_page
MAX_PAGE_SIZE = 200
