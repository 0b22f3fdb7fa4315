"""Primitive scoring transforms for analytes and ratios."""

from __future__ import annotations
from typing import Optional, Literal
import math

from .reference_ranges import ReferenceRange


NEUTRAL_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# Substituted for a zero half-width so the distance never divides by zero
_EPSILON = 0.000001

Status = Literal["Low", "High", "Optimal"]
Band = Literal["red", "yellow", "blue"]


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward positive infinity.

    Python's round() uses banker's rounding (round(56.5) == 56); scores
    are expected to move up on an exact half.

    Example:
        >>> round_half_up(56.5)
        57
        >>> round_half_up(-0.5)
        0
    """
    return int(math.floor(value + 0.5))


def is_missing(value: Optional[float]) -> bool:
    """True for None and NaN (blank spreadsheet cells arrive as NaN)."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def range_centered_score(
    value: Optional[float],
    low: Optional[float],
    high: Optional[float]
) -> int:
    """
    Score closeness of a value to the middle of its reference range.

    Scoring logic:
    - Exact midpoint: 100
    - Either edge of the band: 50
    - Outside the band: keeps falling below 50 with distance, floored at 0

    Degenerate inputs (any of value/low/high absent, or low >= high)
    score a neutral 50.

    Args:
        value: Measured value
        low: Reference range lower bound
        high: Reference range upper bound

    Returns:
        Integer score from 0-100 (higher = closer to mid-range)

    Example:
        >>> range_centered_score(2.1, 1.0, 20.0)
        56
    """
    if is_missing(value) or is_missing(low) or is_missing(high) or low >= high:
        return NEUTRAL_SCORE

    # Halved before combining so extreme finite bounds cannot overflow
    mid = low / 2 + high / 2
    half = high / 2 - low / 2 or _EPSILON
    dist = abs(value - mid)
    normalized = dist / half

    if low <= value <= high:
        # 100 at the midpoint down to 50 at either edge
        base = 100 - normalized * 50
    else:
        # Continues below 50 for every half-width beyond the edge
        base = 100 - (1 + (dist - half) / half) * 50

    return round_half_up(clamp(base, MIN_SCORE, MAX_SCORE))


def ratio_score(actual: Optional[float], target: Optional[float]) -> int:
    """
    Score a ratio by its relative deviation from a target.

    Formula: 100 - (|actual - target| / |target|) * 100, clamped to 0-100.
    Missing operands or a zero target score a neutral 50.

    Args:
        actual: Observed ratio
        target: Target ratio

    Returns:
        Integer score from 0-100 (100 = exactly on target)

    Example:
        >>> ratio_score(17.5 / 165, 0.08)
        67
    """
    if is_missing(actual) or is_missing(target) or target == 0:
        return NEUTRAL_SCORE

    deviation = abs(actual - target) / abs(target)
    return round_half_up(clamp(100 - deviation * 100, MIN_SCORE, MAX_SCORE))


def score_analyte(value: Optional[float], reference: Optional[ReferenceRange]) -> int:
    """Score a single measurement against its reference range (50 without one)."""
    if reference is None:
        return NEUTRAL_SCORE
    return range_centered_score(value, reference.low, reference.high)


def score_ratio(actual: Optional[float], target: Optional[float]) -> int:
    """Score an observed ratio against its target."""
    return ratio_score(actual, target)


def status_from_range(
    value: Optional[float],
    low: Optional[float],
    high: Optional[float]
) -> Optional[Status]:
    """
    Classify a measurement against its reference range.

    Returns:
        'Low', 'High' or 'Optimal'; None when the value or range is unusable
    """
    if is_missing(value) or is_missing(low) or is_missing(high) or low >= high:
        return None
    if value < low:
        return "Low"
    if value > high:
        return "High"
    return "Optimal"


def band_for_score(score: Optional[float]) -> Band:
    """
    Colour band for a 0-100 score: 0-69 red, 70-90 yellow, 91+ blue.

    A missing score falls in the yellow band.
    """
    if score is None:
        return "yellow"
    if score <= 69:
        return "red"
    if score <= 90:
        return "yellow"
    return "blue"
