"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Tuple, Union

from geoinverse.utils.functions import round_half_away


class GeoPoint:
    """
    Representation of a point on the globe as a latitude/longitude pair, in decimal degrees.

    Values are stored as given; latitudes outside [-90, 90] and longitudes outside
    [-180, 180] are not bounded or rejected.
    """

    __slots__ = ('latitude', 'longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, 'latitude', float(latitude))
        object.__setattr__(self, 'longitude', float(longitude))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    def __reduce__(self):
        return self.__class__, (self.latitude, self.longitude)

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeoPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((latitude dms), (longitude dms))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_away(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
