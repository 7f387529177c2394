"""
Validation: Monte-Carlo runs for the battery estimate under wind uncertainty.
Run from project root. Produces success rate and remaining-charge range.
"""
import logging


def main():
    from flightbattery.mission.model import MissionParameters
    from flightbattery.mission.simulate import monte_carlo_mission

    waypoints = [(0.0, 0.0), (1000.0, 1000.0), (2000.0, 2000.0)]
    wind_samples = [(250.0, 250.0, 10.0, 10.0), (1800.0, 1800.0, -5.0, -5.0)]
    params = MissionParameters(airspeed_ms=30.0, initial_charge_wh=100.0, power_draw_w=500.0)
    result = monte_carlo_mission(
        waypoints, wind_samples, params, num_seeds=20, wind_scale=3.0, reserve_fraction=0.2, seed=123
    )
    print("Monte-Carlo validation (20 seeds, wind_scale=3 m/s, reserve 20%)")
    print(f"  Success rate: {result['success_rate']:.2%}")
    print(f"  Runs: {result['runs']}")
    if result["remaining_charges"]:
        print(
            f"  Remaining range: {min(result['remaining_charges']):.2f} - "
            f"{max(result['remaining_charges']):.2f} Wh"
        )
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s: %(message)s")
    main()
