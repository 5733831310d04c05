"""
Bucket tables and numeric helpers shared by the loan and deposit scorers.

A bucket table is an ordered tuple of (threshold, points) rows.
Rows are evaluated top-down and the first matching row wins, so tables
must be sorted from the best bucket to the worst.

    points_at_least(v, table, fallback)  →  first row with v >= threshold
    points_at_most(v, table, fallback)   →  first row with v <= threshold

Values that match no row (including negatives) get the fallback points.
"""
from __future__ import annotations

import math
import sys
from typing import Sequence

BucketTable = Sequence[tuple[float, int]]

MAX_SCORE = 100

# Largest finite float; amounts that overflow saturate here
AMOUNT_CEILING = sys.float_info.max


def points_at_least(value: float, table: BucketTable, fallback: int) -> int:
    for threshold, points in table:
        if value >= threshold:
            return points
    return fallback


def points_at_most(value: float, table: BucketTable, fallback: int) -> int:
    """Lower-is-better variant (ratios, variance)."""
    for threshold, points in table:
        if value <= threshold:
            return points
    return fallback


def label_at_least(value: float, table: BucketTable) -> str:
    for threshold, _ in table:
        if value >= threshold:
            return f"≥{threshold:g}"
    return f"<{table[-1][0]:g}"


def label_at_most(value: float, table: BucketTable) -> str:
    for threshold, _ in table:
        if value <= threshold:
            return f"≤{threshold:g}"
    return f">{table[-1][0]:g}"


def cap(points: int, maximum: int) -> int:
    """Clamp factor points into [0, maximum]."""
    return max(0, min(points, maximum))


def interpolate(low: float, high: float, score: float) -> float:
    """Linear interpolation across the 0–100 score range."""
    return low + (score / MAX_SCORE) * (high - low)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, .5 upwards (built-in round() is
    half-to-even). An overflowed product saturates at ±AMOUNT_CEILING
    instead of raising, so the result is always a plain int.
    """
    if math.isinf(value):
        value = math.copysign(AMOUNT_CEILING, value)
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    return round(value, 2)
