# tests/test_route_sampler.py
import pytest

from app.models.trip import Coordinate
from app.services.route_sampler import RouteSampler

sampler = RouteSampler()


def test_one_degree_on_equator_gives_twelve_points():
    start = Coordinate(lat=0.0, lon=0.0)
    end = Coordinate(lat=0.0, lon=1.0)

    route = sampler.sample(start, end, 10)

    # floor(111.2 / 10) = 11 segments
    assert len(route) == 12
    assert route[0] == start
    assert route[-1] == end
    for i, wp in enumerate(route):
        assert wp.lat == 0.0
        assert wp.lon == pytest.approx(i / 11)


def test_same_start_and_end_gives_four_coincident_points():
    here = Coordinate(lat=45.4642, lon=9.19)

    route = sampler.sample(here, here)

    assert len(route) == 4
    assert all(wp == here for wp in route)


def test_short_trip_uses_minimum_of_three_segments():
    start = Coordinate(lat=45.4642, lon=9.19)
    end = Coordinate(lat=45.48, lon=9.25)  # ~5 km

    route = sampler.sample(start, end)

    assert len(route) == 4
    assert route[0] == start
    assert route[-1] == end


def test_endpoints_are_exact_for_awkward_values():
    start = Coordinate(lat=0.1, lon=0.1)
    end = Coordinate(lat=0.3, lon=0.7)

    route = sampler.sample(start, end, 1)

    assert len(route) >= 3
    assert route[0].lat == 0.1 and route[0].lon == 0.1
    assert route[-1].lat == 0.3 and route[-1].lon == 0.7


def test_interpolation_is_linear_in_lat_and_lon():
    start = Coordinate(lat=40.0, lon=-75.0)
    end = Coordinate(lat=42.0, lon=-71.0)

    route = sampler.sample(start, end, 50)
    n = len(route) - 1

    for i, wp in enumerate(route):
        assert wp.lat == pytest.approx(40.0 + 2.0 * i / n)
        assert wp.lon == pytest.approx(-75.0 + 4.0 * i / n)


def test_segment_length_controls_density():
    start = Coordinate(lat=0.0, lon=0.0)
    end = Coordinate(lat=0.0, lon=1.0)

    assert len(sampler.sample(start, end, 5)) == 23  # floor(22.24) + 1
    assert len(sampler.sample(start, end, 100)) == 4
