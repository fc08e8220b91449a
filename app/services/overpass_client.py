# app/services/overpass_client.py
from typing import Any, Dict, List, Optional, Sequence

import httpx

from app.core.config import settings
from app.core.errors import CollaboratorFailure
from app.core.logger import logger
from app.models.trip import Candidate, Coordinate

DEFAULT_STOP_NAME = "Stop"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_overpass_query(
    waypoints: Sequence[Coordinate],
    preferences: Sequence[str],
    radius_m: int = 3000,
) -> str:
    """
    Build an Overpass QL union with one amenity filter per
    (waypoint, preference) pair, each scoped to radius_m around the waypoint.
    """
    parts = [
        f'node["amenity"="{_quote(pref)}"](around:{radius_m},{wp.lat},{wp.lon});'
        for wp in waypoints
        for pref in preferences
    ]
    body = "\n  ".join(parts)
    return f"[out:json];\n(\n  {body}\n);\nout center;\n"


def parse_element(element: Dict[str, Any]) -> Optional[Candidate]:
    """
    Turn one Overpass element into a Candidate.

    Returns None when the element carries no usable position.
    """
    lat = element.get("lat")
    lon = element.get("lon")
    if lat is None or lon is None:
        center = element.get("center") or {}
        lat, lon = center.get("lat"), center.get("lon")
    if lat is None or lon is None:
        return None

    tags = {str(k): str(v) for k, v in (element.get("tags") or {}).items()}
    name = tags.get("name") or tags.get("amenity") or DEFAULT_STOP_NAME

    return Candidate(
        coordinate=Coordinate(lat=float(lat), lon=float(lon)),
        name=name,
        tags=tags,
    )


class OverpassClient:
    """
    Fetches points of interest around route waypoints from the Overpass API.
    """

    SERVICE = "overpass"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self.client = client
        self.base_url = base_url or settings.OVERPASS_URL

    async def query(
        self,
        waypoints: Sequence[Coordinate],
        preferences: Sequence[str],
        radius_m: int = 3000,
    ) -> List[Candidate]:
        if not waypoints or not preferences:
            logger.info("Nothing to query: no waypoints or no preferences")
            return []

        data = {"data": build_overpass_query(waypoints, preferences, radius_m)}

        try:
            if self.client is not None:
                response = await self.client.post(self.base_url, data=data)
            else:
                async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_S) as client:
                    response = await client.post(self.base_url, data=data)
            response.raise_for_status()
            payload: Any = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Overpass query failed: {exc}")
            raise CollaboratorFailure(self.SERVICE, str(exc)) from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("elements"), list):
            raise CollaboratorFailure(self.SERVICE, "response has no 'elements' list")

        elements = payload["elements"]
        logger.info(f"Overpass response count: {len(elements)}")

        candidates: List[Candidate] = []
        for element in elements:
            if not isinstance(element, dict):
                raise CollaboratorFailure(self.SERVICE, f"unexpected element: {element!r}")
            try:
                candidate = parse_element(element)
            except (AttributeError, TypeError, ValueError) as exc:
                raise CollaboratorFailure(self.SERVICE, f"malformed element: {exc}") from exc
            if candidate is None:
                logger.debug(f"Skipping element without position: {element.get('id')}")
                continue
            candidates.append(candidate)

        return candidates
