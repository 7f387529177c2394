"""
Mission battery estimator: integrate energy consumed along a waypoint path under associated wind.

Public contract:
- Segment wind: the effective wind for segment i is the mean of the winds assigned to
  waypoints i and i + 1.
- Ground speed floor: ground speed is never below min(min_ground_speed_ms, airspeed); a
  segment that hits the floor is flagged clamped (vehicle holding against the headwind).
- Energy: power (W) * time (s) / 3600 -> Wh.
- Remaining charge: initial - used, negative when the mission is infeasible, unless the
  estimator is built with clamp_remaining_at_zero=True.
"""
import logging
from typing import Iterable, Optional, Sequence, Tuple

from flightbattery.core.association import WindAssociation
from flightbattery.core.errors import AssociationError
from flightbattery.mission.association import NearestWindAssociation
from flightbattery.mission.model import (
    SECONDS_PER_HOUR,
    Depletion,
    MissionEstimate,
    MissionParameters,
    SegmentEstimate,
    Waypoint,
    as_waypoints,
    as_wind_samples,
    average_wind,
    decompose_wind,
    distance,
    ground_speed,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_GROUND_SPEED_MS = 0.1


class FlightBatteryEstimator:
    """
    Estimate remaining battery charge at the end of a mission.
    The wind association strategy is fixed at construction time.
    """

    def __init__(
        self,
        association: WindAssociation,
        min_ground_speed_ms: float = DEFAULT_MIN_GROUND_SPEED_MS,
        clamp_remaining_at_zero: bool = False,
    ):
        if not min_ground_speed_ms > 0:
            raise ValueError(f"min_ground_speed_ms must be > 0, got {min_ground_speed_ms}")
        self.association = association
        self.min_ground_speed_ms = min_ground_speed_ms
        self.clamp_remaining_at_zero = clamp_remaining_at_zero

    def segment_estimate(
        self,
        index: int,
        start: Waypoint,
        end: Waypoint,
        wind: Tuple[float, float],
        params: MissionParameters,
    ) -> SegmentEstimate:
        """Time and energy to fly straight from start to end with a constant effective wind."""
        length = distance(start.x, start.y, end.x, end.y)
        if length == 0.0:
            logger.debug("Segment %d has zero length; no time or energy", index)
            return SegmentEstimate(index, 0.0, wind, 0.0, 0.0, params.airspeed_ms, 0.0, 0.0)
        ux = (end.x - start.x) / length
        uy = (end.y - start.y) / length
        along, cross = decompose_wind(wind, ux, uy)
        gs = ground_speed(params.airspeed_ms, along, cross)
        floor = min(self.min_ground_speed_ms, params.airspeed_ms)
        clamped = gs < floor
        if clamped:
            logger.warning(
                "Segment %d: wind overpowers airspeed (ground speed %.3f m/s); clamped to %.3f m/s",
                index, gs, floor,
            )
            gs = floor
        time_s = length / gs
        energy_wh = params.power_draw_w * time_s / SECONDS_PER_HOUR
        return SegmentEstimate(index, length, wind, along, cross, gs, time_s, energy_wh, clamped)

    def estimate(
        self,
        waypoints: Iterable,
        wind_samples: Iterable,
        airspeed_ms: float,
        initial_charge_wh: float,
        power_draw_w: float,
    ) -> MissionEstimate:
        """
        Full per-segment breakdown. Raises InvalidParameterError before doing any work
        if airspeed <= 0, power draw < 0 or initial charge < 0.
        """
        params = MissionParameters(airspeed_ms, initial_charge_wh, power_draw_w)
        params.validate()
        wps = as_waypoints(waypoints)
        samples = as_wind_samples(wind_samples)

        winds = self.association.associate(wps, samples)
        if len(winds) != len(wps):
            raise AssociationError(
                f"{self.association.name} returned {len(winds)} winds for {len(wps)} waypoints"
            )

        result = MissionEstimate(initial_charge_wh=initial_charge_wh)
        if wps:
            result.remaining_at_waypoints.append(initial_charge_wh)
        remaining = initial_charge_wh
        t = 0.0
        for i in range(len(wps) - 1):
            seg = self.segment_estimate(i, wps[i], wps[i + 1], average_wind(winds[i], winds[i + 1]), params)
            result.segments.append(seg)
            if result.depletion is None and seg.energy_wh > 0 and remaining - seg.energy_wh < 0:
                result.depletion = _depletion_point(i, wps[i], wps[i + 1], seg, remaining, t)
            remaining -= seg.energy_wh
            t += seg.time_s
            result.remaining_at_waypoints.append(self._apply_clamp(remaining))

        result.remaining_wh = self._apply_clamp(initial_charge_wh - result.energy_used_wh)
        logger.info(
            "Estimated %d segments with %s: used %.3f Wh, remaining %.3f Wh",
            len(result.segments), self.association.name, result.energy_used_wh, result.remaining_wh,
        )
        return result

    def estimated_battery_remaining(
        self,
        waypoints: Iterable,
        wind_samples: Iterable,
        airspeed_ms: float,
        initial_charge_wh: float,
        power_draw_w: float,
    ) -> float:
        """Remaining charge (Wh) at the last waypoint."""
        return self.estimate(
            waypoints, wind_samples, airspeed_ms, initial_charge_wh, power_draw_w
        ).remaining_wh

    def _apply_clamp(self, value: float) -> float:
        if self.clamp_remaining_at_zero:
            return max(value, 0.0)
        return value


def _depletion_point(
    index: int,
    start: Waypoint,
    end: Waypoint,
    seg: SegmentEstimate,
    remaining_before: float,
    t_before: float,
) -> Depletion:
    """Interpolate where along the segment the remaining charge reaches zero."""
    frac = max(remaining_before, 0.0) / seg.energy_wh
    return Depletion(
        segment_from_waypoint_index=index,
        segment_to_waypoint_index=index + 1,
        x=start.x + frac * (end.x - start.x),
        y=start.y + frac * (end.y - start.y),
        t_s=t_before + frac * seg.time_s,
    )


def estimate_remaining_charge(
    waypoints: Sequence,
    wind_samples: Sequence,
    airspeed_ms: float,
    initial_charge_wh: float,
    power_draw_w: float,
    association: Optional[WindAssociation] = None,
) -> float:
    """Convenience wrapper: nearest-neighbour association unless another strategy is given."""
    estimator = FlightBatteryEstimator(association or NearestWindAssociation())
    return estimator.estimated_battery_remaining(
        waypoints, wind_samples, airspeed_ms, initial_charge_wh, power_draw_w
    )
