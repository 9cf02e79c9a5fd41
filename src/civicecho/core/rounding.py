"""Rounding helpers matching the dashboard's displayed numbers."""

import math


def round_half_up(value: float, ndigits: int = 0):
    """Round halves away from zero for positive values, e.g. 6.25 -> 6.3.

    Built-in round() goes to the nearest even digit instead.
    """
    scale = 10 ** ndigits
    rounded = math.floor(value * scale + 0.5) / scale
    return int(rounded) if ndigits == 0 else rounded
