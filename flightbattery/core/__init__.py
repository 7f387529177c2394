from .association import WindAssociation
from .constraints import Constraint
from .errors import AssociationError, EstimatorError, InvalidParameterError

__all__ = [
    "WindAssociation",
    "Constraint",
    "EstimatorError",
    "InvalidParameterError",
    "AssociationError",
]
