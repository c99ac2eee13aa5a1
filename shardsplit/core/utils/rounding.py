"""Rounding helpers shared by the balancing arithmetic."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values.

    Python's round() uses banker's rounding (round(2.5) == 2); split sizing
    needs floor(x + 0.5) so thresholds stay stable across runs.
    """
    return int(math.floor(value + 0.5))
