"""
Exception hierarchy for the battery estimator.
"""


class EstimatorError(Exception):
    """Base exception for battery estimation errors."""
    pass


class InvalidParameterError(EstimatorError, ValueError):
    """Raised when airspeed, power draw or initial charge is out of range."""
    pass


class AssociationError(EstimatorError):
    """Raised when a wind association is not aligned with its waypoints."""
    pass
