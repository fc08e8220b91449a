# app/api/v1/routes_trips.py
from fastapi import APIRouter, Depends

from app.models.trip import TripRequest, TripResponse
from app.services.trip_planner import TripPlanner

router = APIRouter(
    prefix="/plan-trip",
    tags=["trips"],
)

# Single shared instance; holds no per-request state
trip_planner = TripPlanner()


def get_trip_planner() -> TripPlanner:
    return trip_planner


@router.post(
    "",
    response_model=TripResponse,
    summary="Plan a trip and pick amenity stops along the way",
)
async def plan_trip(
    request: TripRequest,
    planner: TripPlanner = Depends(get_trip_planner),
) -> TripResponse:
    """
    Plan a trip between two named places.

    - Approximates the route by a straight line sampled every ~10 km.
    - Picks at most one stop per waypoint, best preference match first.
    """
    return await planner.plan_trip(request)
