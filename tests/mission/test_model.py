"""Tests for planar mission model and wind-triangle geometry."""
import math
import pytest

from flightbattery.core.errors import InvalidParameterError
from flightbattery.mission.model import (
    MissionParameters,
    Waypoint,
    WindSample,
    as_waypoints,
    as_wind_samples,
    average_wind,
    decompose_wind,
    distance,
    ground_speed,
    path_length,
)


def test_waypoint_is_immutable():
    wp = Waypoint(1.0, 2.0)
    assert wp.position == (1.0, 2.0)
    with pytest.raises(AttributeError):
        wp.x = 5.0


def test_wind_sample_position_and_wind():
    s = WindSample(1.0, 2.0, 3.0, -4.0)
    assert s.position == (1.0, 2.0)
    assert s.wind == (3.0, -4.0)


def test_distance():
    assert distance(0.0, 0.0, 3.0, 4.0) == 5.0
    assert distance(1.0, 1.0, 1.0, 1.0) == 0.0


def test_path_length():
    wps = as_waypoints([(0, 0), (3, 4), (3, 4), (3, 10)])
    assert path_length(wps) == pytest.approx(11.0)
    assert path_length([]) == 0.0


def test_average_wind():
    assert average_wind((10.0, 10.0), (-5.0, -5.0)) == (2.5, 2.5)


def test_decompose_tailwind_and_headwind():
    assert decompose_wind((0.0, 5.0), 0.0, 1.0) == (5.0, 0.0)
    assert decompose_wind((0.0, -5.0), 0.0, 1.0) == (-5.0, 0.0)


def test_decompose_crosswind_magnitude():
    along, cross = decompose_wind((-3.0, 0.0), 0.0, 1.0)
    assert along == 0.0
    assert cross == 3.0


def test_ground_speed_no_wind_equals_airspeed():
    assert ground_speed(30.0, 0.0, 0.0) == 30.0


def test_ground_speed_aligned_wind():
    assert ground_speed(30.0, 5.0, 0.0) == 35.0
    assert ground_speed(30.0, -5.0, 0.0) == 25.0


def test_ground_speed_crosswind_correction():
    assert ground_speed(30.0, 0.0, 10.0) == pytest.approx(math.sqrt(800.0))


def test_ground_speed_crosswind_exceeds_airspeed():
    assert ground_speed(30.0, 0.0, 40.0) == 0.0


def test_as_waypoints_accepts_tuples_and_objects():
    wps = as_waypoints([(1, 2), Waypoint(3.0, 4.0)])
    assert wps == [Waypoint(1.0, 2.0), Waypoint(3.0, 4.0)]


def test_as_wind_samples_accepts_tuples_and_objects():
    samples = as_wind_samples([(0, 0, 1, 2), WindSample(5.0, 5.0, 0.0, 0.0)])
    assert samples[0] == WindSample(0.0, 0.0, 1.0, 2.0)
    assert samples[1].position == (5.0, 5.0)


def test_mission_parameters_valid():
    MissionParameters(30.0, 100.0, 500.0).validate()
    MissionParameters(30.0, 0.0, 0.0).validate()


@pytest.mark.parametrize(
    "airspeed, charge, power",
    [
        (0.0, 100.0, 500.0),
        (-1.0, 100.0, 500.0),
        (float("nan"), 100.0, 500.0),
        (30.0, -1.0, 500.0),
        (30.0, 100.0, -0.5),
    ],
)
def test_mission_parameters_invalid(airspeed, charge, power):
    with pytest.raises(InvalidParameterError):
        MissionParameters(airspeed, charge, power).validate()
