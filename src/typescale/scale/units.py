"""
Unit helpers shared by the scale generator, validator and planner.
"""

import math
from decimal import Decimal


def line_height_to_percentage(multiplier: float) -> float:
    """
    Convert a stored line-height multiplier to a display percentage.

    The decimal point is shifted on the shortest decimal representation, so
    1.15 becomes 115.0 rather than 114.99999999999999.

    Converting back with ``line_height_from_percentage`` returns the same
    multiplier for any value with at most 15 significant digits, which covers
    every value a designer can enter. Full-precision floats with 16 or 17
    digits may come back one ulp off; above 2.56 two of them can even share a
    percentage. Multipliers above about 1.8e306 overflow to infinity.
    """
    if not math.isfinite(multiplier):
        return multiplier * 100
    return float(Decimal(repr(float(multiplier))).scaleb(2))


def line_height_from_percentage(percentage: float) -> float:
    """Convert a display percentage to the stored line-height multiplier."""
    if not math.isfinite(percentage):
        return percentage / 100
    return float(Decimal(repr(float(percentage))).scaleb(-2))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
