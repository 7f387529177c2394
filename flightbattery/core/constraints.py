"""
Feasibility checks run on a finished MissionEstimate (reserve margin, headwind floor).
"""
from abc import ABC, abstractmethod
from typing import Any, Tuple


class Constraint(ABC):
    """A pass/fail check on a MissionEstimate with a violation magnitude."""

    @abstractmethod
    def check(self, estimate: Any) -> Tuple[bool, float]:
        """
        Inspect the estimate's remaining charge and segment breakdown.
        Returns (ok, violation): violation is 0.0 when ok, otherwise how far the
        estimate misses (Wh short of the reserve, number of clamped segments, ...).
        """
        pass

    @property
    def name(self) -> str:
        return self.__class__.__name__
