# tests/conftest.py
import os
import sys

import pytest

# Add the project root directory to sys.path so that "import app" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.models.trip import Coordinate  # noqa: E402


@pytest.fixture
def equator_route():
    """Four waypoints along the equator, ~37 km apart."""
    return [Coordinate(lat=0.0, lon=lon) for lon in (0.0, 1 / 3, 2 / 3, 1.0)]
