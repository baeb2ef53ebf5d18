"""
Geodesic distance on the WGS84 ellipsoid using Vincenty's inverse formula.
"""

__all__ = ['inverse', 'inverse_array']

import math

import numpy as np

from geoinverse._const import (
    CONVERGENCE_THRESHOLD, MAX_ITERATIONS, WGS84_A, WGS84_B, WGS84_F
)
from geoinverse.coordinates import GeoPoint
from geoinverse.distance import Distance, NOT_CONVERGED_METERS
from geoinverse.utils.functions import round_half_away
from geoinverse.utils.logging import warn_once


def _inverse_meters(lat1: float, lon1: float, lat2: float, lon2: float):
    """
    Runs Vincenty's inverse formula on raw decimal degrees.

    Returns:
        The distance in meters rounded to the millimeter, or None if the
        iteration did not converge within MAX_ITERATIONS
    """
    # Short-circuit coincident points
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    U1 = math.atan((1 - WGS84_F) * math.tan(math.radians(lat1)))
    U2 = math.atan((1 - WGS84_F) * math.tan(math.radians(lat2)))
    L = math.radians(lon2 - lon1)
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return 0.0  # Coincident points

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            # Equatorial line
            cos2SigmaM = 0

        # eq. 10
        C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * WGS84_F * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < CONVERGENCE_THRESHOLD:
            break
    else:
        return None

    # eq. 3, 4, 6
    uSq = cosSqAlpha * (WGS84_A ** 2 - WGS84_B ** 2) / (WGS84_B ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )

    # eq. 19
    s = WGS84_B * A * (sigma - deltaSigma)
    return round_half_away(s, 3)


def _warn_not_converged():
    warn_once(
        "Vincenty's inverse formula did not converge within "
        f'{MAX_ITERATIONS} iterations (usually nearly-antipodal points); '
        f'returning a not-converged Distance ({NOT_CONVERGED_METERS} m). '
        '(this warning will not repeat)'
    )


def inverse(point1: GeoPoint, point2: GeoPoint) -> Distance:
    """
    Calculate the distance between two points on the surface of the WGS84
    ellipsoid using Vincenty's formula (inverse method).

    Nearly-antipodal points may fail to converge within the iteration cap; the
    result is then Distance.not_converged(), whose meter value is -1.0.
    Coordinates are not validated.

    Args:
        point1:
            The start point

        point2:
            The end point

    Returns:
        Distance, rounded to the millimeter
    """
    meters = _inverse_meters(
        point1.latitude, point1.longitude,
        point2.latitude, point2.longitude
    )
    if meters is None:
        _warn_not_converged()
        return Distance.not_converged()

    return Distance(meters)


def _inverse_meters_or_sentinel(lat1, lon1, lat2, lon2) -> float:
    meters = _inverse_meters(float(lat1), float(lon1), float(lat2), float(lon2))
    if meters is None:
        _warn_not_converged()
        return NOT_CONVERGED_METERS

    return meters


_inverse_vectorized = np.vectorize(_inverse_meters_or_sentinel, otypes=[np.float64])


def inverse_array(lat1, lon1, lat2, lon2) -> np.ndarray:
    """
    Element-wise Vincenty inverse distances for arrays of decimal-degree coordinates.

    Inputs are broadcast against one another following numpy rules. Each element is
    computed exactly as inverse() would compute it.

    Args:
        lat1:
            Array-like of start latitudes

        lon1:
            Array-like of start longitudes

        lat2:
            Array-like of end latitudes

        lon2:
            Array-like of end longitudes

    Returns:
        np.ndarray of float64 distances in meters, with -1.0 wherever the
        iteration did not converge
    """
    return _inverse_vectorized(
        np.asarray(lat1, dtype=np.float64),
        np.asarray(lon1, dtype=np.float64),
        np.asarray(lat2, dtype=np.float64),
        np.asarray(lon2, dtype=np.float64),
    )
