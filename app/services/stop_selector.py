# app/services/stop_selector.py
from typing import List, Optional, Sequence, Set

from app.core.logger import logger
from app.models.trip import Coordinate, ScoredCandidate, StopIdentity
from app.utils.geo import haversine_km


class StopSelector:
    """
    Picks at most one stop per waypoint.

    For each waypoint (in route order) the best candidate within
    max_distance_km wins: highest score first, then shortest distance.
    A stop already chosen for an earlier waypoint is never chosen again,
    and the waypoint then yields nothing (no fallback to the runner-up).
    """

    def select(
        self,
        route: Sequence[Coordinate],
        candidates: Sequence[ScoredCandidate],
        max_distance_km: float = 5.0,
    ) -> List[ScoredCandidate]:
        if not candidates:
            return []

        chosen: Set[StopIdentity] = set()
        stops: List[ScoredCandidate] = []

        for idx, waypoint in enumerate(route):
            best = self._best_near(waypoint, candidates, max_distance_km)
            if best is None:
                continue

            if best.identity in chosen:
                logger.debug(
                    "Waypoint {}: best stop {!r} already taken, skipping",
                    idx,
                    best.name,
                )
                continue

            chosen.add(best.identity)
            stops.append(best)

        return stops

    @staticmethod
    def _best_near(
        waypoint: Coordinate,
        candidates: Sequence[ScoredCandidate],
        max_distance_km: float,
    ) -> Optional[ScoredCandidate]:
        best: Optional[ScoredCandidate] = None
        best_dist = float("inf")

        for cand in candidates:
            dist = haversine_km(waypoint, cand.coordinate)
            if dist > max_distance_km:
                continue
            if (
                best is None
                or cand.score > best.score
                or (cand.score == best.score and dist < best_dist)
            ):
                best = cand
                best_dist = dist

        return best
