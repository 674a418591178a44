"""Great-circle distance between geographic points (Haversine, SLC, Vincenty)."""

from .distance import (
    METHODS,
    distance,
    haversine,
    haversine_result,
    slc,
    slc_result,
    spherical_law_of_cosines,
    vincenty,
    vincenty_result,
)
from .result import FAILURE, ConvergenceError, DistanceResult, FailureReason
from .units import Unit

__all__ = [
    "haversine",
    "slc",
    "spherical_law_of_cosines",
    "vincenty",
    "haversine_result",
    "slc_result",
    "vincenty_result",
    "distance",
    "METHODS",
    "Unit",
    "DistanceResult",
    "FailureReason",
    "ConvergenceError",
    "FAILURE",
]
