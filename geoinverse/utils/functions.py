"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_away']

import math


def round_half_away(value: float, precision: int = 0) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded away from zero.

    The value is scaled by 10 ** precision, rounded to an integer, and scaled back
    down by division, so a millimeter rounding of meters reads
    `round_half_away(s, 3) == round(s * 1000) / 1000` with ties going away from zero.

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to round the float value to

    """
    scale = 10 ** precision
    scaled = value * scale
    if not math.isfinite(scaled):
        return value

    whole = math.floor(abs(scaled))
    if abs(scaled) - whole >= 0.5:
        whole += 1

    return math.copysign(whole, scaled) / scale
