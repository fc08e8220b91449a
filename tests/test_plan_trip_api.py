# tests/test_plan_trip_api.py
from fastapi.testclient import TestClient

from app.api.v1.routes_trips import get_trip_planner
from app.core.errors import CollaboratorFailure, GeocodeNotFound
from app.main import app
from app.models.trip import TripRequest, TripResponse, TripStop


class StubPlanner:
    def __init__(self, result=None, error=None) -> None:
        self.result = result
        self.error = error
        self.requests = []

    async def plan_trip(self, request: TripRequest) -> TripResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


def client_with(planner: StubPlanner) -> TestClient:
    app.dependency_overrides[get_trip_planner] = lambda: planner
    return TestClient(app, raise_server_exceptions=False)


def teardown_function():
    app.dependency_overrides.clear()


def test_plan_trip_success():
    stop = TripStop(
        lat=45.47, lon=9.22, name="Bar Centrale", type="cafe",
        tags={"amenity": "cafe"}, score=1, matched_preferences=["cafe"],
    )
    planner = StubPlanner(result=TripResponse(route=[[45.46, 9.19], [45.48, 9.25]], stops=[stop]))
    client = client_with(planner)

    response = client.post(
        "/plan-trip",
        json={"start": " Milan ", "end": "Monza", "preferences": ["cafe", "", "cafe"]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["route"] == [[45.46, 9.19], [45.48, 9.25]]
    assert data["stops"][0]["name"] == "Bar Centrale"
    assert data["stops"][0]["matchedPreferences"] == ["cafe"]
    assert "matched_preferences" not in data["stops"][0]

    sent = planner.requests[0]
    assert sent.start == "Milan"
    assert sent.preferences == ["cafe"]


def test_geocode_failure_is_client_error():
    client = client_with(StubPlanner(error=GeocodeNotFound("Atlantis")))

    response = client.post("/plan-trip", json={"start": "Atlantis", "end": "Milan", "preferences": []})

    assert response.status_code == 400
    assert response.text == "Unable to geocode city names."


def test_collaborator_failure_is_server_error():
    client = client_with(StubPlanner(error=CollaboratorFailure("overpass", "504")))

    response = client.post("/plan-trip", json={"start": "Milan", "end": "Rome", "preferences": ["fuel"]})

    assert response.status_code == 500
    assert response.text == "Error processing trip plan"


def test_unexpected_failure_is_server_error():
    client = client_with(StubPlanner(error=RuntimeError("bug")))

    response = client.post("/plan-trip", json={"start": "Milan", "end": "Rome"})

    assert response.status_code == 500
    assert response.text == "Error processing trip plan"


def test_malformed_input_is_server_error():
    planner = StubPlanner()
    client = client_with(planner)

    response = client.post("/plan-trip", json={"start": "Milan"})

    assert response.status_code == 500
    assert response.text == "Error processing trip plan"
    assert planner.requests == []


def test_blank_place_is_rejected():
    client = client_with(StubPlanner())

    response = client.post("/plan-trip", json={"start": "   ", "end": "Rome"})

    assert response.status_code == 500


def test_stop_accepts_camel_case_key():
    stop = TripStop.model_validate({
        "lat": 1.0, "lon": 2.0, "name": "WC", "type": "toilets",
        "tags": {}, "score": 1, "matchedPreferences": ["toilets"],
    })

    assert stop.matched_preferences == ["toilets"]
    assert stop.model_dump(by_alias=True)["matchedPreferences"] == ["toilets"]
