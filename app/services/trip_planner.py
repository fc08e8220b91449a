# app/services/trip_planner.py

import asyncio
from time import perf_counter
from typing import List, Optional, Tuple

from app.core.config import settings
from app.core.errors import GeocodeNotFound
from app.core.logger import logger
from app.models.trip import Coordinate, TripRequest, TripResponse, TripStop
from app.services.candidate_scorer import CandidateScorer
from app.services.geocoding_client import NominatimClient
from app.services.overpass_client import OverpassClient
from app.services.route_sampler import RouteSampler
from app.services.stop_selector import StopSelector
from app.utils.geo import crosses_antimeridian


class TripPlanner:
    """
    High-level trip planning service:
    - resolves start/end place names (concurrently)
    - samples waypoints along the straight start -> end path
    - fetches amenities around the waypoints
    - scores them against the preferences and keeps one stop per waypoint
    """

    def __init__(
        self,
        geocoder: Optional[NominatimClient] = None,
        poi_client: Optional[OverpassClient] = None,
        sampler: Optional[RouteSampler] = None,
        scorer: Optional[CandidateScorer] = None,
        selector: Optional[StopSelector] = None,
    ) -> None:
        self.geocoder = geocoder or NominatimClient()
        self.poi_client = poi_client or OverpassClient()
        self.sampler = sampler or RouteSampler()
        self.scorer = scorer or CandidateScorer()
        self.selector = selector or StopSelector()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def plan_trip(self, request: TripRequest) -> TripResponse:
        """
        Main entry point for the /plan-trip endpoint.

        1. Geocode start and end; both must succeed before anything else.
        2. Sample the route.
        3. Query POIs for every (waypoint, preference) pair.
        4. Score candidates and select stops.
        """
        t0 = perf_counter()
        logger.info(
            f"Received trip request {request.start!r} -> {request.end!r}, "
            f"preferences={request.preferences}"
        )

        # 1) Geocoding (join point)
        start, end = await self._resolve_endpoints(request.start, request.end)
        t_geo = perf_counter()
        logger.info(f"Endpoints geocoded in {(t_geo - t0) * 1000.0:.2f} ms")

        # 2) Waypoints
        route = self.sampler.sample(start, end, settings.SEGMENT_LENGTH_KM)

        # 3) Candidates
        candidates = await self.poi_client.query(
            route,
            request.preferences,
            settings.POI_RADIUS_M,
        )
        t_poi = perf_counter()
        logger.info(
            f"{len(candidates)} candidates for {len(route)} waypoints "
            f"fetched in {(t_poi - t_geo) * 1000.0:.2f} ms"
        )

        # 4) Scoring + selection
        scored = self.scorer.score_all(candidates, request.preferences)
        stops = self.selector.select(route, scored, settings.MAX_STOP_DISTANCE_KM)

        t1 = perf_counter()
        logger.info(
            f"Selected {len(stops)} stops; total planning time {(t1 - t0) * 1000.0:.2f} ms"
        )

        warnings: List[str] = []
        if crosses_antimeridian(start, end):
            warnings.append(
                "Start and end lie on opposite sides of the 180th meridian; "
                "the sampled route goes the long way round."
            )

        return TripResponse(
            route=[wp.as_pair() for wp in route],
            stops=[TripStop.from_scored(s) for s in stops],
            warnings=warnings,
        )

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _resolve_endpoints(self, start: str, end: str) -> Tuple[Coordinate, Coordinate]:
        """
        Geocode both endpoints concurrently and wait for both lookups.

        If either place is unknown, GeocodeNotFound is raised even when the
        other lookup failed too; otherwise the start lookup's error wins.
        """
        results = await asyncio.gather(
            self.geocoder.resolve(start),
            self.geocoder.resolve(end),
            return_exceptions=True,
        )
        errors = [r for r in results if isinstance(r, BaseException)]
        if errors:
            not_found = [e for e in errors if isinstance(e, GeocodeNotFound)]
            raise (not_found or errors)[0]
        return results[0], results[1]
