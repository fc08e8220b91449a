# tests/helpers.py
from typing import Dict, Optional

from app.models.trip import Candidate, Coordinate, ScoredCandidate


def make_candidate(
    lat: float,
    lon: float,
    name: str = "Stop",
    tags: Optional[Dict[str, str]] = None,
) -> Candidate:
    return Candidate(coordinate=Coordinate(lat=lat, lon=lon), name=name, tags=tags or {})


def make_scored(
    lat: float,
    lon: float,
    name: str = "Stop",
    score: int = 0,
) -> ScoredCandidate:
    return ScoredCandidate(
        coordinate=Coordinate(lat=lat, lon=lon),
        name=name,
        tags={},
        score=score,
        matched_preferences=[f"pref{i}" for i in range(score)],
    )
