"""
Module for unit conversions
"""
__all__ = ['UNIT_FACTORS', 'convert_from_meters', 'convert_to_meters']

from geoinverse._const import (
    METERS_PER_FOOT, METERS_PER_KILOMETER, METERS_PER_MILE, METERS_PER_NAUTICAL_MILE
)

# Meters per unit, keyed by unit code
UNIT_FACTORS = {
    'm': 1.0,
    'km': METERS_PER_KILOMETER,
    'nmi': METERS_PER_NAUTICAL_MILE,
    'mi': METERS_PER_MILE,
    'ft': METERS_PER_FOOT,
}


def _get_factor(unit: str) -> float:
    unit = unit.lower()
    if unit not in UNIT_FACTORS:
        raise ValueError(f"Unknown unit '{unit}'. Options: {list(UNIT_FACTORS.keys())}")

    return UNIT_FACTORS[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi').

    Returns:
        float: The distance in meters.
    """
    return distance * _get_factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance value, in meters.
        unit (str): The target unit (see convert_to_meters)

    Returns:
        float: The distance in the target unit.
    """
    return distance / _get_factor(unit)
