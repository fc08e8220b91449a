# app/models/trip.py

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinate(BaseModel):
    """
    Simple latitude/longitude coordinate, in degrees.
    """
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)

    def as_pair(self) -> List[float]:
        return [self.lat, self.lon]


# Stop identity used for deduplication: (name, lat, lon)
StopIdentity = Tuple[str, float, float]


class Candidate(BaseModel):
    """
    Raw point of interest as returned by the POI collaborator.

    `tags` is an open key/value bag (amenity, cuisine, toilets, shop, ...);
    any key may be missing.
    """
    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate
    name: str
    tags: Dict[str, str] = Field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.tags.get("amenity") or "unknown"

    @property
    def identity(self) -> StopIdentity:
        return (self.name, self.coordinate.lat, self.coordinate.lon)


class ScoredCandidate(Candidate):
    """
    Candidate plus how well it matches the request's preferences.

    score is always len(matched_preferences).
    """
    score: int = Field(default=0, ge=0)
    matched_preferences: List[str] = Field(default_factory=list)


class TripRequest(BaseModel):
    """
    Request body for the /plan-trip endpoint.
    """
    start: str = Field(min_length=1)
    end: str = Field(min_length=1)
    preferences: List[str] = Field(default_factory=list)

    @field_validator("start", "end")
    @classmethod
    def strip_place(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("place name must not be blank")
        return value

    @field_validator("preferences")
    @classmethod
    def clean_preferences(cls, prefs: List[str]) -> List[str]:
        # Drop blanks and repeats, keep caller order
        cleaned: List[str] = []
        for pref in prefs:
            pref = pref.strip()
            if pref and pref not in cleaned:
                cleaned.append(pref)
        return cleaned


class TripStop(BaseModel):
    """
    One selected stop as exposed to the caller.

    Serialized with the camelCase key `matchedPreferences` that existing
    trip planner clients read.
    """
    model_config = ConfigDict(populate_by_name=True)

    lat: float
    lon: float
    name: str
    type: str
    tags: Dict[str, str]
    score: int
    matched_preferences: List[str] = Field(alias="matchedPreferences")

    @classmethod
    def from_scored(cls, stop: ScoredCandidate) -> "TripStop":
        return cls(
            lat=stop.coordinate.lat,
            lon=stop.coordinate.lon,
            name=stop.name,
            type=stop.type,
            tags=dict(stop.tags),
            score=stop.score,
            matched_preferences=list(stop.matched_preferences),
        )


class TripResponse(BaseModel):
    """
    Response for the /plan-trip endpoint.

    - `route` is the list of sampled waypoints as [lat, lon] pairs, in order
      from start to end.
    - `stops` follows waypoint order, at most one stop per waypoint.
    """
    route: List[List[float]]
    stops: List[TripStop]
    warnings: Optional[List[str]] = []
