"""
Single entry point: estimate the battery remaining for the mission defined in mission_settings.
Saves the estimate, constraint checks and Monte-Carlo robustness to outputs/battery_estimate.json.
"""
import json
import logging
import os

from flightbattery.mission_settings import (
    MISSION_WAYPOINTS,
    WIND_SAMPLES,
    WIND_ASSOCIATION,
    MISSION_AIRSPEED_MS,
    BATTERY_INITIAL_CHARGE_WH,
    CONSTANT_SPEED_POWER_DRAW_W,
    MIN_GROUND_SPEED_MS,
    CLAMP_REMAINING_AT_ZERO,
    RESERVE_FRACTION,
    MONTE_CARLO_NUM_SEEDS,
    MONTE_CARLO_WIND_SCALE_MS,
    MONTE_CARLO_SEED,
)

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

logger = logging.getLogger(__name__)


def build_output(
    waypoints,
    wind_samples,
    airspeed_ms: float,
    initial_charge_wh: float,
    power_draw_w: float,
    association: str = WIND_ASSOCIATION,
    reserve_fraction: float = RESERVE_FRACTION,
    num_seeds: int = MONTE_CARLO_NUM_SEEDS,
) -> dict:
    """
    Run estimate + constraint checks + Monte-Carlo and return the JSON-ready report.
    Raises InvalidParameterError for bad vehicle parameters, ValueError for an unknown association.
    """
    from flightbattery.mission.association import get_association
    from flightbattery.mission.constraints import HeadwindConstraint, ReserveConstraint
    from flightbattery.mission.estimator import FlightBatteryEstimator
    from flightbattery.mission.model import MissionParameters, as_waypoints, as_wind_samples, path_length
    from flightbattery.mission.simulate import monte_carlo_mission

    wps = as_waypoints(waypoints)
    samples = as_wind_samples(wind_samples)
    params = MissionParameters(airspeed_ms, initial_charge_wh, power_draw_w)
    estimator = FlightBatteryEstimator(
        get_association(association),
        min_ground_speed_ms=MIN_GROUND_SPEED_MS,
        clamp_remaining_at_zero=CLAMP_REMAINING_AT_ZERO,
    )
    estimate = estimator.estimate(wps, samples, airspeed_ms, initial_charge_wh, power_draw_w)

    reserve_ok, reserve_v = ReserveConstraint(reserve_fraction).check(estimate)
    headwind_ok, headwind_v = HeadwindConstraint().check(estimate)
    mc = monte_carlo_mission(
        wps,
        samples,
        params,
        estimator=estimator,
        num_seeds=num_seeds,
        wind_scale=MONTE_CARLO_WIND_SCALE_MS,
        reserve_fraction=reserve_fraction,
        seed=MONTE_CARLO_SEED,
    )

    return {
        "module": "Flight battery estimator",
        "wind_association": association,
        "segment_wind_policy": "average_of_endpoints",
        "parameters": {
            "airspeed_ms": airspeed_ms,
            "initial_charge_wh": initial_charge_wh,
            "power_draw_w": power_draw_w,
            "min_ground_speed_ms": MIN_GROUND_SPEED_MS,
            "clamp_remaining_at_zero": CLAMP_REMAINING_AT_ZERO,
            "reserve_fraction": reserve_fraction,
        },
        "waypoints": [list(w.position) for w in wps],
        "wind_samples": [[s.x, s.y, s.wind_x, s.wind_y] for s in samples],
        "path_length_m": path_length(wps),
        "estimate": estimate.to_dict(),
        "remaining_wh": estimate.remaining_wh,
        "constraint_checks": {
            "reserve_kept": reserve_ok,
            "reserve_shortfall_wh": reserve_v,
            "headwind_ok": headwind_ok,
            "clamped_segments": int(headwind_v),
        },
        "robustness": {
            "description": "Monte-Carlo: random constant wind offset added to every sample per run.",
            "monte_carlo": mc,
        },
    }


def run_estimate(save: bool = True) -> dict:
    """Estimate the mission from mission_settings; save to outputs/ when save is True."""
    out = build_output(
        MISSION_WAYPOINTS,
        WIND_SAMPLES,
        MISSION_AIRSPEED_MS,
        BATTERY_INITIAL_CHARGE_WH,
        CONSTANT_SPEED_POWER_DRAW_W,
    )
    if save:
        os.makedirs(os.path.join(ROOT, "outputs"), exist_ok=True)
        path = os.path.join(ROOT, "outputs", "battery_estimate.json")
        with open(path, "w") as f:
            json.dump(out, f, indent=2)
        logger.info("Battery estimate saved to %s", path)
    return out


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    print("Running battery estimate...")
    out = run_estimate()
    est = out["estimate"]
    print(f"  Energy used: {est['energy_used_wh']:.3f} Wh over {est['total_time_s']:.1f} s")
    print(f"  Remaining:   {out['remaining_wh']:.3f} Wh")
    print(f"  Reserve kept: {out['constraint_checks']['reserve_kept']}")
    print(f"  Monte-Carlo success rate: {out['robustness']['monte_carlo']['success_rate']:.2%}")
    print("Done. Check outputs/")


if __name__ == "__main__":
    main()
