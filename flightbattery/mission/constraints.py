"""
Mission feasibility constraints: reserve margin and overpowering headwind.
All implement the core Constraint interface and check a MissionEstimate.
"""
from typing import Tuple

from flightbattery.core.constraints import Constraint
from flightbattery.mission.model import MissionEstimate


class ReserveConstraint(Constraint):
    """Remaining charge must stay at or above reserve_fraction of the initial charge."""

    def __init__(self, reserve_fraction: float = 0.0):
        if not 0.0 <= reserve_fraction <= 1.0:
            raise ValueError(f"reserve_fraction must be in [0, 1], got {reserve_fraction}")
        self.reserve_fraction = reserve_fraction

    def check(self, estimate: MissionEstimate) -> Tuple[bool, float]:
        required = estimate.initial_charge_wh * self.reserve_fraction
        if estimate.remaining_wh >= required:
            return True, 0.0
        return False, required - estimate.remaining_wh


class HeadwindConstraint(Constraint):
    """No segment may need the ground-speed floor."""

    def check(self, estimate: MissionEstimate) -> Tuple[bool, float]:
        clamped = sum(1 for s in estimate.segments if s.clamped)
        if clamped > 0:
            return False, float(clamped)
        return True, 0.0
