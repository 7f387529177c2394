"""
Pluggable wind association interface.
The estimator only needs one wind vector per waypoint; how it is picked is up to the strategy.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple


class WindAssociation(ABC):
    """
    Strategy interface: associate(waypoints, wind_samples) -> one (wind_x, wind_y) per waypoint.
    """

    @abstractmethod
    def associate(
        self, waypoints: Sequence[Any], wind_samples: Sequence[Any]
    ) -> List[Tuple[float, float]]:
        """
        Return a list aligned with waypoints: element i is the wind vector for waypoints[i].
        Must not mutate waypoints or wind_samples. Empty wind_samples -> zero vectors.
        """
        pass

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return self.__class__.__name__
