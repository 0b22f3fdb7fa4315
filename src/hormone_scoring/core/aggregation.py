"""Weighted aggregation of scores into sub-scores and composites."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional
import math
import numpy as np

from .scoring import clamp, round_half_up, is_missing, MIN_SCORE, MAX_SCORE


@dataclass(frozen=True)
class WeightedItem:
    """One score contributing to a weighted average."""
    value: Optional[float] = None
    weight: Optional[float] = None


def weighted_average(items: Iterable[WeightedItem]) -> int:
    """
    Calculate a rounded weighted average of 0-100 scores.

    Absent weights count as 0 and absent values as 0, so an item with
    no weight contributes nothing.

    Formula: round(sum(weight * value) / sum(weight))

    Args:
        items: WeightedItem entries

    Returns:
        Integer score from 0-100; 0 when the total weight is 0

    Example:
        >>> weighted_average([WeightedItem(80, 3), WeightedItem(50, 1)])
        73
    """
    items = list(items)
    weights = np.array(
        [0.0 if is_missing(item.weight) else float(item.weight) for item in items],
        dtype=float
    )
    values = np.array(
        [0.0 if is_missing(item.value) else float(item.value) for item in items],
        dtype=float
    )

    largest = float(np.abs(weights).max()) if len(weights) else 0.0
    if largest == 0:
        return 0
    # Power-of-two rescale is exact and keeps very large weights from overflowing
    weights = weights / math.ldexp(1.0, math.frexp(largest)[1] - 1)

    total_weight = float(weights.sum())
    if total_weight == 0:
        return 0

    with np.errstate(over="ignore", invalid="ignore"):
        average = float(np.dot(weights, values)) / total_weight
    average = float(np.nan_to_num(average, nan=MIN_SCORE, posinf=MAX_SCORE, neginf=MIN_SCORE))
    return round_half_up(clamp(average, MIN_SCORE, MAX_SCORE))
