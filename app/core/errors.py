# app/core/errors.py
"""
Failure taxonomy of the trip planner.

Only the I/O layer raises these; the sampling, scoring and selection code
works on validated in-memory data and never fails. The API maps every
error to exactly one of two outcomes: a client error for an unknown place
name, and a generic server error for everything else.
"""


class TripPlannerError(Exception):
    """Base class for trip planning failures."""


class GeocodeNotFound(TripPlannerError):
    """A place name resolved to zero geocoding results."""

    def __init__(self, place: str) -> None:
        super().__init__(f"No geocoding result for {place!r}")
        self.place = place


class CollaboratorFailure(TripPlannerError):
    """An external service errored or returned an unusable payload."""

    def __init__(self, service: str, detail: str) -> None:
        super().__init__(f"{service} failure: {detail}")
        self.service = service
        self.detail = detail
