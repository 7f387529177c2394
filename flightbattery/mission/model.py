"""
Planar mission model: waypoints, wind samples, mission parameters and wind-triangle geometry.
Flat 2D frame; positions in meters; wind and airspeed in m/s; power in W; charge in Wh.
"""
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from flightbattery.core.errors import InvalidParameterError

SECONDS_PER_HOUR = 3600.0
ZERO_WIND: Tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class Waypoint:
    """A 2D point the mission passes through, in traversal order."""

    x: float
    y: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class WindSample:
    """Wind vector (wind_x, wind_y) observed at (x, y). Vector points where the air moves to."""

    x: float
    y: float
    wind_x: float
    wind_y: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def wind(self) -> Tuple[float, float]:
        return (self.wind_x, self.wind_y)


@dataclass(frozen=True)
class MissionParameters:
    """Caller-supplied constants for one estimation call."""

    airspeed_ms: float
    initial_charge_wh: float
    power_draw_w: float

    def validate(self) -> None:
        """Raise InvalidParameterError if any parameter is out of range (NaN included)."""
        if not self.airspeed_ms > 0:
            raise InvalidParameterError(f"airspeed must be > 0, got {self.airspeed_ms}")
        if not self.power_draw_w >= 0:
            raise InvalidParameterError(f"power draw must be >= 0, got {self.power_draw_w}")
        if not self.initial_charge_wh >= 0:
            raise InvalidParameterError(
                f"initial charge must be >= 0, got {self.initial_charge_wh}"
            )


@dataclass
class SegmentEstimate:
    """Time and energy for one segment, from waypoint index to index + 1."""

    index: int
    length_m: float
    wind: Tuple[float, float]
    along_track_ms: float
    cross_track_ms: float
    ground_speed_ms: float
    time_s: float
    energy_wh: float
    clamped: bool = False


@dataclass
class Depletion:
    """Point where the battery reaches zero charge."""

    segment_from_waypoint_index: int
    segment_to_waypoint_index: int
    x: float
    y: float
    t_s: float


@dataclass
class MissionEstimate:
    """Full breakdown of one estimation call."""

    initial_charge_wh: float
    segments: List[SegmentEstimate] = field(default_factory=list)
    remaining_at_waypoints: List[float] = field(default_factory=list)
    remaining_wh: float = 0.0
    depletion: Optional[Depletion] = None

    @property
    def total_time_s(self) -> float:
        return sum(s.time_s for s in self.segments)

    @property
    def energy_used_wh(self) -> float:
        return sum(s.energy_wh for s in self.segments)

    @property
    def feasible(self) -> bool:
        return self.depletion is None

    def to_dict(self) -> dict:
        return {
            "initial_charge_wh": self.initial_charge_wh,
            "remaining_wh": self.remaining_wh,
            "energy_used_wh": self.energy_used_wh,
            "total_time_s": self.total_time_s,
            "feasible": self.feasible,
            "remaining_at_waypoints": list(self.remaining_at_waypoints),
            "segments": [
                {
                    "index": s.index,
                    "length_m": s.length_m,
                    "wind": list(s.wind),
                    "along_track_ms": s.along_track_ms,
                    "cross_track_ms": s.cross_track_ms,
                    "ground_speed_ms": s.ground_speed_ms,
                    "time_s": s.time_s,
                    "energy_wh": s.energy_wh,
                    "clamped": s.clamped,
                }
                for s in self.segments
            ],
            "depletion": None if self.depletion is None else {
                "segment_from_waypoint_index": self.depletion.segment_from_waypoint_index,
                "segment_to_waypoint_index": self.depletion.segment_to_waypoint_index,
                "x": self.depletion.x,
                "y": self.depletion.y,
                "t_s": self.depletion.t_s,
            },
        }


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance in the planar frame."""
    return math.hypot(x1 - x0, y1 - y0)


def average_wind(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def decompose_wind(
    wind: Tuple[float, float], ux: float, uy: float
) -> Tuple[float, float]:
    """
    Split wind into (along_track, cross_track) for unit direction (ux, uy).
    Along-track is signed (positive = tailwind); cross-track is a magnitude.
    """
    along = wind[0] * ux + wind[1] * uy
    cross = abs(wind[0] * uy - wind[1] * ux)
    return along, cross


def ground_speed(airspeed: float, along: float, cross: float) -> float:
    """
    Wind-triangle ground speed along the track: part of the airspeed cancels the crosswind
    drift, the rest adds to the along-track wind. May be zero or negative.
    """
    available = math.sqrt(max(airspeed * airspeed - cross * cross, 0.0))
    return available + along


def as_waypoints(points: Iterable) -> List[Waypoint]:
    """Normalize (x, y) tuples or Waypoint objects to a list of Waypoint."""
    out = []
    for p in points:
        if isinstance(p, Waypoint):
            out.append(p)
        else:
            out.append(Waypoint(float(p[0]), float(p[1])))
    return out


def as_wind_samples(samples: Iterable) -> List[WindSample]:
    """Normalize (x, y, wind_x, wind_y) tuples or WindSample objects to a list of WindSample."""
    out = []
    for s in samples:
        if isinstance(s, WindSample):
            out.append(s)
        else:
            out.append(WindSample(float(s[0]), float(s[1]), float(s[2]), float(s[3])))
    return out


def path_length(waypoints: Sequence[Waypoint]) -> float:
    """Total planar length of the path through waypoints in order."""
    return sum(
        distance(a.x, a.y, b.x, b.y) for a, b in zip(waypoints, waypoints[1:])
    )
