"""
Great-circle (orthodromic) distance between two geographic points.

Three methods of increasing accuracy are provided:

    Algorithm                       Kilometers          Miles
    ------------------------------------------------------------------
    Haversine                       5540.1754190795     3442.5054053574
    Spherical Law of Cosines        5540.1754190795     3442.5054053574
    Vincenty (inverse)              5555.0656860095     3451.7577882724

(JFK {40.641766, -73.780968} to LHR {51.470020, -0.454295}.)

Haversine and SLC model Earth as a sphere of mean radius; Vincenty works
on the WGS84 ellipsoid. Each method comes in two forms: ``haversine()``
returns a plain float and -1 on failure, ``haversine_result()`` returns a
DistanceResult that tells a domain error apart from non-convergence.
"""

import logging
import math
from typing import Callable

from .result import ConvergenceError, DistanceResult, FailureReason
from .units import (
    DEG_TO_RAD,
    MEAN_RADIUS_KM,
    WGS84_A,
    WGS84_B,
    WGS84_F,
    Unit,
    convert_km,
)

logger = logging.getLogger(__name__)

# Vincenty iteration budget and convergence threshold on lambda (radians)
MAX_ITERATIONS = 100
CONVERGENCE_THRESHOLD = 1e-12


def _haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> tuple[float, int]:
    phi1 = lat1 * DEG_TO_RAD
    phi2 = lat2 * DEG_TO_RAD

    a = math.sin((phi2 - phi1) / 2)
    a *= a

    b = math.sin(((lon2 - lon1) / 2) * DEG_TO_RAD)
    b *= b * math.cos(phi1) * math.cos(phi2)

    # Rounding can push a + b just above 1 for antipodal points
    central_angle = 2 * math.asin(math.sqrt(min(1.0, a + b)))

    return central_angle * MEAN_RADIUS_KM, 0


def _slc_km(lat1: float, lon1: float, lat2: float, lon2: float) -> tuple[float, int]:
    # sin² + cos² may round to just under 1.0 for coincident points
    if lat1 == lat2 and lon1 == lon2:
        return 0.0, 0

    phi1 = lat1 * DEG_TO_RAD
    phi2 = lat2 * DEG_TO_RAD
    delta_lambda = (lon1 - lon2) * DEG_TO_RAD

    cos_c = math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(phi2) * math.cos(
        delta_lambda
    )
    central_angle = math.acos(max(-1.0, min(1.0, cos_c)))

    return central_angle * MEAN_RADIUS_KM, 0


def _vincenty_km(lat1: float, lon1: float, lat2: float, lon2: float) -> tuple[float, int]:
    """
    Vincenty's inverse solution on the WGS84 ellipsoid.

    Iterates on the longitude difference on the auxiliary sphere until it
    changes by less than CONVERGENCE_THRESHOLD.

    Returns:
        (distance in kilometers, iterations used)

    Raises:
        ConvergenceError: if MAX_ITERATIONS pass without convergence,
            which happens for nearly antipodal points
    """
    a, b, f = WGS84_A, WGS84_B, WGS84_F

    phi1 = lat1 * DEG_TO_RAD
    phi2 = lat2 * DEG_TO_RAD
    delta_lambda = (lon2 - lon1) * DEG_TO_RAD

    # Reduced latitudes
    u1 = math.atan((1 - f) * math.tan(phi1))
    u2 = math.atan((1 - f) * math.tan(phi2))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lam = delta_lambda
    for iteration in range(1, MAX_ITERATIONS + 1):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        term1 = cos_u2 * sin_lam
        term2 = cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam

        sin_sigma = math.sqrt(term1 * term1 + term2 * term2)
        if sin_sigma == 0.0:
            # Coincident points
            return 0.0, iteration

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)

        sin_alpha = (cos_u1 * cos_u2 * sin_lam) / sin_sigma
        cos2_alpha = 1.0 - sin_alpha * sin_alpha

        # cos2_alpha is 0 for geodesics along the equator
        if cos2_alpha != 0.0:
            cos_2sigma_m = cos_sigma - (2.0 * sin_u1 * sin_u2) / cos2_alpha
        else:
            cos_2sigma_m = 0.0

        u_sq = (cos2_alpha * (a * a - b * b)) / (b * b)
        big_a = 1.0 + (u_sq / 16384.0) * (
            4096.0 + u_sq * (-768.0 + u_sq * (320.0 - 175.0 * u_sq))
        )
        big_b = (u_sq / 1024.0) * (256.0 + u_sq * (-128.0 + u_sq * (74.0 - 47.0 * u_sq)))

        cos_2sigma_m_sq = cos_2sigma_m * cos_2sigma_m
        delta_sigma = big_b * sin_sigma * (
            cos_2sigma_m
            + (big_b / 4.0)
            * (
                cos_sigma * (-1.0 + 2.0 * cos_2sigma_m_sq)
                - (big_b / 6.0)
                * cos_2sigma_m
                * (-3.0 + 4.0 * sin_sigma * sin_sigma)
                * (-3.0 + 4.0 * cos_2sigma_m_sq)
            )
        )

        c = (f / 16.0) * cos2_alpha * (4.0 + f * (4.0 - 3.0 * cos2_alpha))

        lam_prev = lam
        lam = delta_lambda + (1.0 - c) * f * sin_alpha * (
            sigma
            + c * sin_sigma * (cos_2sigma_m + c * cos_sigma * (-1.0 + 2.0 * cos_2sigma_m_sq))
        )

        if abs(lam - lam_prev) < CONVERGENCE_THRESHOLD:
            break
    else:
        raise ConvergenceError(MAX_ITERATIONS)

    # Ellipsoidal arc length, meters to kilometers
    s = b * big_a * (sigma - delta_sigma) / 1000.0

    return s, iteration


def _evaluate(
    method: str,
    solver: Callable[[float, float, float, float], tuple[float, int]],
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: Unit,
) -> DistanceResult:
    """Run a solver and map any numeric failure to a failed DistanceResult."""
    coords = (lat1, lon1, lat2, lon2)

    if not all(math.isfinite(x) for x in coords):
        logger.debug("%s: non-finite input %s", method, coords)
        return DistanceResult.failed(method, unit, FailureReason.DOMAIN_ERROR)

    try:
        km, iterations = solver(*coords)
    except ConvergenceError as e:
        logger.debug("%s: %s for %s", method, e, coords)
        return DistanceResult.failed(
            method, unit, FailureReason.NON_CONVERGENCE, iterations=e.iterations
        )
    except (ValueError, OverflowError, ZeroDivisionError) as e:
        logger.debug("%s: domain error %r for %s", method, e, coords)
        return DistanceResult.failed(method, unit, FailureReason.DOMAIN_ERROR)

    if not math.isfinite(km):
        logger.debug("%s: non-finite result %r for %s", method, km, coords)
        return DistanceResult.failed(
            method, unit, FailureReason.DOMAIN_ERROR, iterations=iterations
        )

    return DistanceResult(
        method=method,
        unit=unit,
        distance=convert_km(km, unit),
        iterations=iterations,
    )


def haversine_result(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: Unit = Unit.SI
) -> DistanceResult:
    """Haversine distance as a DistanceResult."""
    return _evaluate("haversine", _haversine_km, lat1, lon1, lat2, lon2, unit)


def slc_result(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: Unit = Unit.SI
) -> DistanceResult:
    """Spherical Law of Cosines distance as a DistanceResult."""
    return _evaluate("slc", _slc_km, lat1, lon1, lat2, lon2, unit)


def vincenty_result(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: Unit = Unit.SI
) -> DistanceResult:
    """Vincenty inverse distance as a DistanceResult."""
    return _evaluate("vincenty", _vincenty_km, lat1, lon1, lat2, lon2, unit)


def haversine(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: Unit = Unit.SI
) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula on a sphere of mean radius, which stays
    numerically stable for small distances.

    Args:
        lat1: Latitude of first point (degrees)
        lon1: Longitude of first point (degrees)
        lat2: Latitude of second point (degrees)
        lon2: Longitude of second point (degrees)
        unit: Unit.SI for kilometers, Unit.US for miles

    Returns:
        Distance in the requested unit, or -1 on failure
    """
    return haversine_result(lat1, lon1, lat2, lon2, unit).value


def slc(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: Unit = Unit.SI
) -> float:
    """
    Calculate the great-circle distance using the Spherical Law of Cosines.

    Results match Haversine, but precision degrades for nearly identical
    points since acos() is evaluated close to 1.0. Prefer haversine() for
    short distances.

    Args:
        lat1: Latitude of first point (degrees)
        lon1: Longitude of first point (degrees)
        lat2: Latitude of second point (degrees)
        lon2: Longitude of second point (degrees)
        unit: Unit.SI for kilometers, Unit.US for miles

    Returns:
        Distance in the requested unit, or -1 on failure
    """
    return slc_result(lat1, lon1, lat2, lon2, unit).value


spherical_law_of_cosines = slc


def vincenty(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: Unit = Unit.SI
) -> float:
    """
    Calculate the geodesic distance on the WGS84 ellipsoid (Vincenty inverse).

    The most accurate of the three methods, but iterative: it can fail to
    converge for nearly antipodal points, in which case -1 is returned, the
    same as for any other numeric failure. Use vincenty_result() to tell
    the two apart.

    Args:
        lat1: Latitude of first point (degrees)
        lon1: Longitude of first point (degrees)
        lat2: Latitude of second point (degrees)
        lon2: Longitude of second point (degrees)
        unit: Unit.SI for kilometers, Unit.US for miles

    Returns:
        Distance in the requested unit, or -1 on failure
    """
    return vincenty_result(lat1, lon1, lat2, lon2, unit).value


METHODS: dict[str, Callable[..., DistanceResult]] = {
    "haversine": haversine_result,
    "slc": slc_result,
    "vincenty": vincenty_result,
}


def distance(
    method: str,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: Unit = Unit.SI,
) -> DistanceResult:
    """
    Calculate a distance with the method picked by name.

    Args:
        method: One of "haversine", "slc", "vincenty"

    Raises:
        ValueError: if the method name is unknown
    """
    try:
        solver = METHODS[method]
    except KeyError:
        raise ValueError(
            f"Unknown method: {method!r} (expected one of {', '.join(METHODS)})"
        ) from None
    return solver(lat1, lon1, lat2, lon2, unit)
