# app/services/geocoding_client.py
from typing import Any, Optional

import httpx

from app.core.config import settings
from app.core.errors import CollaboratorFailure, GeocodeNotFound
from app.core.logger import logger
from app.models.trip import Coordinate


class NominatimClient:
    """
    Resolves place names to coordinates with the Nominatim search API.

    Only the first result is used.
    """

    SERVICE = "nominatim"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.client = client
        self.base_url = base_url or settings.NOMINATIM_URL
        self.headers = {"User-Agent": user_agent or settings.HTTP_USER_AGENT}

    async def resolve(self, place: str) -> Coordinate:
        params = {"q": place, "format": "json", "limit": 1}

        try:
            if self.client is not None:
                response = await self.client.get(self.base_url, params=params, headers=self.headers)
            else:
                async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_S) as client:
                    response = await client.get(self.base_url, params=params, headers=self.headers)
            response.raise_for_status()
            results: Any = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Geocoding request for {place!r} failed: {exc}")
            raise CollaboratorFailure(self.SERVICE, str(exc)) from exc

        if not isinstance(results, list):
            raise CollaboratorFailure(self.SERVICE, "expected a JSON list of results")
        if not results:
            logger.info(f"No geocoding result for {place!r}")
            raise GeocodeNotFound(place)

        first = results[0]
        try:
            coord = Coordinate(lat=float(first["lat"]), lon=float(first["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise CollaboratorFailure(self.SERVICE, f"malformed result: {first!r}") from exc

        logger.info(f"Geocoded {place!r} -> ({coord.lat:.6f}, {coord.lon:.6f})")
        return coord
