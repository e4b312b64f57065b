"""Arithmetic blend of valid readings."""

import math
from collections.abc import Iterable

from weatherblend.models.reading import Reading, is_valid


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +infinity.

    70.5 -> 71, -70.5 -> -70. Python's round() would give 70 for 70.5.
    """
    return math.floor(x + 0.5)


def valid_values(readings: Iterable[Reading]) -> list[float]:
    return [r.value for r in readings if is_valid(r)]


def blend_readings(readings: Iterable[Reading]) -> int | None:
    """Mean of the valid readings, rounded half-up.

    Returns None when no reading is valid; never 0 as a stand-in.
    """
    values = valid_values(readings)
    if not values:
        return None
    # Dividing each term first keeps the sum finite for finite inputs.
    n = len(values)
    return round_half_up(math.fsum(v / n for v in values))
