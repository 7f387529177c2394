"""
Shared pytest fixtures for battery estimator tests.
Ensures project root is on sys.path so flightbattery.* and webapp.* import correctly.
"""
import os
import sys
import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def sample_waypoints():
    """Diagonal route of three (x, y) waypoints in meters."""
    return [
        (0.0, 0.0),
        (1000.0, 1000.0),
        (2000.0, 2000.0),
    ]


@pytest.fixture
def sample_wind_samples():
    """Two wind samples (x, y, wind_x, wind_y): tailwind near the start, headwind near the end."""
    return [
        (250.0, 250.0, 10.0, 10.0),
        (1800.0, 1800.0, -5.0, -5.0),
    ]


@pytest.fixture
def estimator():
    from flightbattery.mission.association import NearestWindAssociation
    from flightbattery.mission.estimator import FlightBatteryEstimator
    return FlightBatteryEstimator(NearestWindAssociation())
