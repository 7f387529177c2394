"""
Mission robustness (Monte-Carlo with wind uncertainty).
"""
import logging
import random
from typing import Iterable, Optional

from flightbattery.mission.association import NearestWindAssociation
from flightbattery.mission.constraints import ReserveConstraint
from flightbattery.mission.estimator import FlightBatteryEstimator
from flightbattery.mission.model import MissionParameters, WindSample, as_waypoints, as_wind_samples

logger = logging.getLogger(__name__)


def perturb_wind_samples(samples, v_x: float, v_y: float):
    """Return new samples with (v_x, v_y) added to every wind vector."""
    return [WindSample(s.x, s.y, s.wind_x + v_x, s.wind_y + v_y) for s in samples]


def monte_carlo_mission(
    waypoints: Iterable,
    wind_samples: Iterable,
    params: MissionParameters,
    estimator: Optional[FlightBatteryEstimator] = None,
    num_seeds: int = 10,
    wind_scale: float = 2.0,
    reserve_fraction: float = 0.0,
    seed: Optional[int] = 42,
) -> dict:
    """
    Run the estimate under multiple wind perturbations; report success rate and metrics.
    Each run adds one random constant offset (uniform in +/- wind_scale m/s per axis) to every sample.
    A run succeeds when the remaining charge keeps the reserve.
    """
    params.validate()
    rng = random.Random(seed)
    estimator = estimator or FlightBatteryEstimator(NearestWindAssociation())
    wps = as_waypoints(waypoints)
    samples = as_wind_samples(wind_samples)
    reserve = ReserveConstraint(reserve_fraction)
    if len(wps) < 2:
        return {"success_rate": 1.0, "runs": 0, "remaining_charges": [], "total_times": []}

    results = []
    for _ in range(num_seeds):
        v_x = rng.uniform(-wind_scale, wind_scale)
        v_y = rng.uniform(-wind_scale, wind_scale)
        est = estimator.estimate(
            wps,
            perturb_wind_samples(samples, v_x, v_y),
            params.airspeed_ms,
            params.initial_charge_wh,
            params.power_draw_w,
        )
        ok, _ = reserve.check(est)
        results.append({"success": ok, "remaining": est.remaining_wh, "total_time": est.total_time_s})

    successes = sum(1 for r in results if r["success"])
    logger.info("Monte-Carlo: %d/%d runs kept the reserve", successes, len(results))
    return {
        "success_rate": successes / len(results) if results else 1.0,
        "runs": len(results),
        "remaining_charges": [r["remaining"] for r in results],
        "total_times": [r["total_time"] for r in results],
    }
