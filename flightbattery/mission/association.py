"""
Wind association strategies: pick a representative wind vector for each waypoint.
"""
import logging
import math
from typing import List, Sequence, Tuple

from flightbattery.core.association import WindAssociation
from flightbattery.mission.model import ZERO_WIND, Waypoint, WindSample, distance

logger = logging.getLogger(__name__)


class NearestWindAssociation(WindAssociation):
    """
    Nearest-neighbour lookup, O(W*S). Ties go to the sample that appears first in wind_samples.
    """

    def associate(
        self, waypoints: Sequence[Waypoint], wind_samples: Sequence[WindSample]
    ) -> List[Tuple[float, float]]:
        if not wind_samples:
            return [ZERO_WIND for _ in waypoints]
        out = []
        for wp in waypoints:
            best = None
            best_d = math.inf
            for sample in wind_samples:
                d = distance(wp.x, wp.y, sample.x, sample.y)
                if d < best_d:
                    best_d = d
                    best = sample
            out.append(best.wind)
        return out


class InverseDistanceWindAssociation(WindAssociation):
    """
    Blend of all samples weighted by 1 / d**power.
    A waypoint lying on a sample (d**power == 0.0, underflow included) takes that sample's wind,
    first one on ties.
    """

    def __init__(self, power: float = 2.0):
        if not power > 0:
            raise ValueError(f"power must be > 0, got {power}")
        self.power = power

    def associate(
        self, waypoints: Sequence[Waypoint], wind_samples: Sequence[WindSample]
    ) -> List[Tuple[float, float]]:
        if not wind_samples:
            return [ZERO_WIND for _ in waypoints]
        out = []
        for wp in waypoints:
            total_w = 0.0
            wx = 0.0
            wy = 0.0
            exact = None
            for sample in wind_samples:
                d = distance(wp.x, wp.y, sample.x, sample.y)
                scaled = d ** self.power
                # underflow counts as coincident
                if scaled == 0.0:
                    exact = sample.wind
                    break
                w = 1.0 / scaled
                total_w += w
                wx += w * sample.wind_x
                wy += w * sample.wind_y
            if exact is not None:
                out.append(exact)
            else:
                out.append((wx / total_w, wy / total_w))
        return out


ASSOCIATIONS = {
    "nearest": NearestWindAssociation,
    "inverse_distance": InverseDistanceWindAssociation,
}


def get_association(name: str) -> WindAssociation:
    """Build a strategy by its settings name ("nearest" or "inverse_distance")."""
    key = (name or "nearest").strip().lower()
    if key not in ASSOCIATIONS:
        raise ValueError(f"Unknown wind association {name!r}; expected one of {sorted(ASSOCIATIONS)}")
    logger.debug("Using wind association %s", key)
    return ASSOCIATIONS[key]()
