# app/utils/geo.py
import math

from app.models.trip import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """
    Great-circle distance between two coordinates (degrees), in kilometres.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def crosses_antimeridian(a: Coordinate, b: Coordinate) -> bool:
    """
    True when the short way between a and b crosses the 180th meridian,
    i.e. when straight lat/lon interpolation goes the long way round.
    """
    return abs(b.lon - a.lon) > 180.0
