"""
Battery estimate Flask app.
Serves mission settings, the last saved estimate from outputs/, and on-demand estimates.
"""
import json
import logging
import os

from flask import Flask, jsonify, request

from flightbattery.core.errors import InvalidParameterError

app = Flask(__name__)

# Path to outputs and project root (parent of webapp)
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUTS = os.path.join(ROOT, "outputs")

logger = logging.getLogger(__name__)


def _load_json(name: str):
    path = os.path.join(OUTPUTS, name)
    if not os.path.isfile(path):
        return None
    try:
        with open(path, "r") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


@app.route("/api/settings")
def api_settings():
    """Return current mission settings from mission_settings."""
    from flightbattery.mission_settings import (
        MISSION_WAYPOINTS,
        WIND_SAMPLES,
        WIND_ASSOCIATION,
        MISSION_AIRSPEED_MS,
        BATTERY_INITIAL_CHARGE_WH,
        CONSTANT_SPEED_POWER_DRAW_W,
        RESERVE_FRACTION,
    )
    return jsonify({
        "waypoints": [list(w) for w in MISSION_WAYPOINTS],
        "wind_samples": [list(s) for s in WIND_SAMPLES],
        "wind_association": WIND_ASSOCIATION,
        "airspeed_ms": MISSION_AIRSPEED_MS,
        "initial_charge_wh": BATTERY_INITIAL_CHARGE_WH,
        "power_draw_w": CONSTANT_SPEED_POWER_DRAW_W,
        "reserve_fraction": RESERVE_FRACTION,
    })


@app.route("/api/estimate", methods=["GET"])
def api_estimate_saved():
    data = _load_json("battery_estimate.json")
    if data is None:
        return jsonify({"error": "No battery estimate found. POST /api/start_mission to run the mission from settings."}), 404
    return jsonify(data)


@app.route("/api/estimate", methods=["POST"])
def api_estimate():
    """Estimate a caller-provided mission. Body: waypoints, wind_samples, airspeed_ms, initial_charge_wh, power_draw_w."""
    from flightbattery.run_all import build_output

    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Malformed request: body must be a JSON object"}), 400
    try:
        waypoints = [(float(w[0]), float(w[1])) for w in data.get("waypoints") or []]
        wind_samples = [
            (float(s[0]), float(s[1]), float(s[2]), float(s[3]))
            for s in data.get("wind_samples") or []
        ]
        airspeed = float(data["airspeed_ms"])
        initial = float(data["initial_charge_wh"])
        power = float(data["power_draw_w"])
        association = data.get("association") or "nearest"
        if not isinstance(association, str):
            raise TypeError(f"association must be a string, got {association!r}")
    except (KeyError, IndexError, TypeError, ValueError) as e:
        return jsonify({"error": f"Malformed request: {e}"}), 400

    try:
        out = build_output(
            waypoints,
            wind_samples,
            airspeed,
            initial,
            power,
            association=association,
        )
    except InvalidParameterError as e:
        return jsonify({"error": str(e), "invalid_parameter": True}), 400
    except ValueError as e:
        # unknown association name
        return jsonify({"error": str(e)}), 400
    return jsonify(out)


@app.route("/api/start_mission", methods=["POST"])
def api_start_mission():
    """Run the estimate from mission_settings; write to outputs/."""
    from flightbattery.run_all import run_estimate

    out = run_estimate(save=True)
    return jsonify({"ok": True, "remaining_wh": out["remaining_wh"]})


def main():
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s: %(message)s")
    app.run(host="127.0.0.1", port=5000, debug=False)


if __name__ == "__main__":
    main()
