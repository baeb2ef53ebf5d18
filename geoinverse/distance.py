"""
Result type of the geodesic solver
"""

__all__ = ['Distance', 'NOT_CONVERGED_METERS']

from numbers import Real

from geoinverse._const import (
    METERS_PER_FOOT, METERS_PER_KILOMETER, METERS_PER_MILE, METERS_PER_NAUTICAL_MILE
)
from geoinverse.conversion import convert_from_meters

# Meter value reported when Vincenty's iteration does not converge
NOT_CONVERGED_METERS = -1.0


class Distance:
    """
    An arc length along the surface of the ellipsoid.

    The value is stored in meters; every other unit is a division of that value.
    Distances produced by a failed iteration are flagged with converged=False and
    report NOT_CONVERGED_METERS (-1.0) as their meter value, so code comparing
    against the numeric sentinel keeps working.

    Args:
        meters:
            The distance, in meters

        converged: (bool)
            (Default True) Whether the distance came from a converged solution.
            Prefer Distance.not_converged() over passing False directly.
    """

    __slots__ = ('_meters', '_converged')

    def __init__(self, meters: float, converged: bool = True):
        object.__setattr__(self, '_meters', float(meters) if converged else NOT_CONVERGED_METERS)
        object.__setattr__(self, '_converged', bool(converged))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if isinstance(other, Distance):
            return self._meters == other._meters and self._converged == other._converged

        if isinstance(other, Real) and not isinstance(other, bool):
            return self._meters == other

        return NotImplemented

    def __hash__(self):
        return hash(self._meters)

    def __float__(self):
        return self._meters

    def __repr__(self):
        if not self._converged:
            return '<Distance(NotConverged)>'

        return f'<Distance({self._meters} m)>'

    def __reduce__(self):
        return self.__class__, (self._meters, self._converged)

    @classmethod
    def not_converged(cls) -> 'Distance':
        """The result of an iteration that hit its cap without converging"""
        return cls(NOT_CONVERGED_METERS, converged=False)

    @property
    def converged(self) -> bool:
        return self._converged

    @property
    def metres(self) -> float:
        return self._meters

    @property
    def meters(self) -> float:
        return self._meters

    @property
    def kilometres(self) -> float:
        return self._meters / METERS_PER_KILOMETER

    @property
    def kilometers(self) -> float:
        return self._meters / METERS_PER_KILOMETER

    @property
    def nautical_miles(self) -> float:
        return self._meters / METERS_PER_NAUTICAL_MILE

    @property
    def miles(self) -> float:
        """Statute miles"""
        return self._meters / METERS_PER_MILE

    @property
    def feet(self) -> float:
        return self._meters / METERS_PER_FOOT

    def to(self, unit: str) -> float:
        """
        Express the distance in a unit given by its code.

        Args:
            unit:
                One of 'm', 'km', 'nmi', 'mi', 'ft' (case-insensitive)

        Returns:
            float

        Raises:
            ValueError if the unit code is not recognized
        """
        return convert_from_meters(self._meters, unit)
