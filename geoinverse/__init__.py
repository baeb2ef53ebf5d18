from geoinverse._version import __version__  # noqa: F401
from geoinverse.utils.logging import LOGGER
from geoinverse.coordinates import GeoPoint
from geoinverse.distance import Distance, NOT_CONVERGED_METERS
from geoinverse.geodesic import inverse, inverse_array


__all__ = [
    'Distance',
    'GeoPoint',
    'NOT_CONVERGED_METERS',
    'inverse',
    'inverse_array',
    'LOGGER',
]
