import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up, as scoreboards display them.

    Python's ``round`` uses banker's rounding, so ``round(0.5) == 0``; this returns 1.
    """
    return math.floor(value + 0.5)
