# app/services/route_sampler.py
import math
from typing import List

from app.core.logger import logger
from app.models.trip import Coordinate
from app.utils.geo import haversine_km


class RouteSampler:
    """
    Approximates the path between two coordinates by a straight line and
    samples it at roughly fixed intervals.

    Latitude and longitude are interpolated independently (no geodesic
    slerp), so points are evenly spaced in index, not in true distance.
    """

    MIN_SEGMENTS: int = 3

    def sample(
        self,
        start: Coordinate,
        end: Coordinate,
        segment_length_km: float = 10.0,
    ) -> List[Coordinate]:
        total_km = haversine_km(start, end)
        segments = max(self.MIN_SEGMENTS, math.floor(total_km / segment_length_km))

        points: List[Coordinate] = [start]
        for i in range(1, segments):
            t = i / segments
            points.append(
                Coordinate(
                    lat=start.lat + (end.lat - start.lat) * t,
                    lon=start.lon + (end.lon - start.lon) * t,
                )
            )
        # End point exactly, not a float re-computation of it
        points.append(end)

        logger.debug(
            "Sampled route: {:.1f} km -> {} segments, {} waypoints",
            total_km,
            segments,
            len(points),
        )
        return points
