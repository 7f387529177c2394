"""
Mission settings constants for the battery estimate (run_all.py and the webapp).
Edit this file to change waypoints, wind samples, vehicle parameters, and robustness settings.
"""

from typing import List, Tuple

# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------

# Waypoints: list of (x_m, y_m) in a local planar frame, flown in order.
MISSION_WAYPOINTS: List[Tuple[float, float]] = [
    (0.0, 1000.0),
    (0.0, 2000.0),
    (1500.0, 2000.0),
    (1500.0, 3000.0),
]

# Wind samples: list of (x_m, y_m, wind_x_ms, wind_y_ms). Empty = no wind.
WIND_SAMPLES: List[Tuple[float, float, float, float]] = [
    (0.0, 1000.0, 5.0, 0.0),
    (1600.0, 1900.0, 0.0, 5.0),
]

# Wind association: "nearest" | "inverse_distance"
WIND_ASSOCIATION = "nearest"

# ---------------------------------------------------------------------------
# Vehicle
# ---------------------------------------------------------------------------

MISSION_AIRSPEED_MS = 30.0
BATTERY_INITIAL_CHARGE_WH = 100.0
CONSTANT_SPEED_POWER_DRAW_W = 500.0

# Ground speed never drops below min(MIN_GROUND_SPEED_MS, airspeed)
MIN_GROUND_SPEED_MS = 0.1

# False: remaining charge may go negative (deficit). True: floored at 0.
CLAMP_REMAINING_AT_ZERO = False

# Fraction of initial charge that must remain at the last waypoint
RESERVE_FRACTION = 0.2

# ---------------------------------------------------------------------------
# Robustness
# ---------------------------------------------------------------------------

# Monte-Carlo: number of wind perturbations, perturbation scale (m/s) and RNG seed
MONTE_CARLO_NUM_SEEDS = 10
MONTE_CARLO_WIND_SCALE_MS = 2.0
MONTE_CARLO_SEED = 42
