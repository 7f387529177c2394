"""Tests for wind association strategies."""
import pytest

from flightbattery.mission.association import (
    InverseDistanceWindAssociation,
    NearestWindAssociation,
    get_association,
)
from flightbattery.mission.model import as_waypoints, as_wind_samples


def test_nearest_empty_samples_gives_zero_wind():
    wps = as_waypoints([(0, 0), (10, 10), (20, 20)])
    assert NearestWindAssociation().associate(wps, []) == [(0.0, 0.0)] * 3


def test_nearest_empty_waypoints():
    samples = as_wind_samples([(0, 0, 1, 1)])
    assert NearestWindAssociation().associate([], samples) == []


def test_nearest_picks_closest(sample_waypoints, sample_wind_samples):
    wps = as_waypoints(sample_waypoints)
    samples = as_wind_samples(sample_wind_samples)
    winds = NearestWindAssociation().associate(wps, samples)
    assert winds == [(10.0, 10.0), (10.0, 10.0), (-5.0, -5.0)]


def test_nearest_output_aligned_with_waypoints(sample_wind_samples):
    wps = as_waypoints([(0, 0)] * 7)
    winds = NearestWindAssociation().associate(wps, as_wind_samples(sample_wind_samples))
    assert len(winds) == 7


def test_nearest_tie_goes_to_first_sample():
    wps = as_waypoints([(0, 0)])
    east = (1.0, 0.0, 3.0, 0.0)
    west = (-1.0, 0.0, 0.0, 3.0)
    assoc = NearestWindAssociation()
    assert assoc.associate(wps, as_wind_samples([east, west])) == [(3.0, 0.0)]
    assert assoc.associate(wps, as_wind_samples([west, east])) == [(0.0, 3.0)]


def test_nearest_independent_of_storage_order_without_ties():
    wps = as_waypoints([(0, 0), (100, 0), (0, 100), (55, 55)])
    samples = [(0, 0, 1, 0), (100, 0, 2, 0), (0, 100, 3, 0), (60, 50, 4, 0)]
    assoc = NearestWindAssociation()
    forward = assoc.associate(wps, as_wind_samples(samples))
    backward = assoc.associate(wps, as_wind_samples(list(reversed(samples))))
    assert forward == backward
    assert forward == [(1.0, 0.0), (2.0, 0.0), (3.0, 0.0), (4.0, 0.0)]


def test_nearest_does_not_mutate_inputs(sample_waypoints, sample_wind_samples):
    wps = as_waypoints(sample_waypoints)
    samples = as_wind_samples(sample_wind_samples)
    before = (list(wps), list(samples))
    NearestWindAssociation().associate(wps, samples)
    assert (wps, samples) == before


def test_inverse_distance_blends_equidistant_samples():
    samples = as_wind_samples([(0, 0, 10, 0), (10, 0, 0, 10)])
    winds = InverseDistanceWindAssociation().associate(as_waypoints([(5, 0)]), samples)
    assert winds[0] == pytest.approx((5.0, 5.0))


def test_inverse_distance_exact_on_sample():
    samples = as_wind_samples([(0, 0, 10, 0), (10, 0, 0, 10)])
    winds = InverseDistanceWindAssociation().associate(as_waypoints([(10, 0)]), samples)
    assert winds == [(0.0, 10.0)]


def test_inverse_distance_weights_closer_sample_more():
    samples = as_wind_samples([(0, 0, 10, 0), (10, 0, 0, 0)])
    wx, wy = InverseDistanceWindAssociation().associate(as_waypoints([(2, 0)]), samples)[0]
    assert 5.0 < wx < 10.0
    assert wy == 0.0


def test_inverse_distance_underflow_treated_as_coincident():
    samples = as_wind_samples([(1e-200, 0, 7, 0), (10, 0, 0, 10)])
    winds = InverseDistanceWindAssociation().associate(as_waypoints([(0, 0)]), samples)
    assert winds == [(7.0, 0.0)]


def test_inverse_distance_empty_samples():
    assoc = InverseDistanceWindAssociation(power=1.0)
    assert assoc.associate(as_waypoints([(1, 1)]), []) == [(0.0, 0.0)]


def test_inverse_distance_rejects_bad_power():
    with pytest.raises(ValueError):
        InverseDistanceWindAssociation(power=0.0)


def test_get_association_by_name():
    assert isinstance(get_association("nearest"), NearestWindAssociation)
    assert isinstance(get_association(" Inverse_Distance "), InverseDistanceWindAssociation)


def test_get_association_unknown_name():
    with pytest.raises(ValueError):
        get_association("kriging")
