"""Timepoint history: stored snapshots, recomputed series and trend deltas."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Literal

from .models import MeasurementSnapshot
from .reference_ranges import ReferenceTable, DEFAULT_REFERENCE_RANGES
from .weights import WeightConfig, DEFAULT_WEIGHTS
from .composite import CompositeScores, compute_composites
from .scoring import round_half_up
from ..utils import get_logger

_log = get_logger(__name__)

Trend = Literal["up", "down", "flat"]


@dataclass(frozen=True)
class CompositeSeries:
    """Composites for every stored snapshot, in history order."""
    labels: Tuple[str, ...]
    menstrual: Tuple[int, ...]
    adrenal: Tuple[int, ...]


@dataclass(frozen=True)
class CompositeDelta:
    """Signed one-decimal change of each composite, current vs previous."""
    menstrual: float
    adrenal: float


def composite_delta(current: float, previous: float) -> float:
    """
    Signed change rounded to one decimal place.

    Example:
        >>> composite_delta(72, 68)
        4.0
    """
    return round_half_up((current - previous) * 10) / 10


def trend_direction(delta: Optional[float]) -> Optional[Trend]:
    """'up', 'down' or 'flat' for a delta; None when there is no delta."""
    if delta is None:
        return None
    if delta > 0:
        return "up"
    if delta < 0:
        return "down"
    return "flat"


class TimepointHistory:
    """Ordered measurement snapshots plus the current and previous sample.

    The stored sequence only grows. ``current`` and ``previous`` are
    references to immutable snapshots and always move together:
    appending a visit or swapping the working sample shifts the old
    current into ``previous``.

    Weights are shared by every snapshot. Changing them changes the whole
    recomputed series; there is no per-snapshot weight freezing.
    """

    def __init__(
        self,
        reference_ranges: ReferenceTable = DEFAULT_REFERENCE_RANGES,
        weights: WeightConfig = DEFAULT_WEIGHTS,
        snapshots: Sequence[MeasurementSnapshot] = ()
    ):
        self._reference_ranges = reference_ranges
        self._weights = weights
        self._snapshots: List[MeasurementSnapshot] = list(snapshots)
        self._current: Optional[MeasurementSnapshot] = self._snapshots[-1] if self._snapshots else None
        self._previous: Optional[MeasurementSnapshot] = (
            self._snapshots[-2] if len(self._snapshots) > 1 else None
        )

    @property
    def snapshots(self) -> Tuple[MeasurementSnapshot, ...]:
        return tuple(self._snapshots)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(snapshot.label for snapshot in self._snapshots)

    @property
    def current(self) -> Optional[MeasurementSnapshot]:
        return self._current

    @property
    def previous(self) -> Optional[MeasurementSnapshot]:
        return self._previous

    @property
    def reference_ranges(self) -> ReferenceTable:
        return self._reference_ranges

    @reference_ranges.setter
    def reference_ranges(self, reference_ranges: ReferenceTable) -> None:
        self._reference_ranges = reference_ranges

    @property
    def weights(self) -> WeightConfig:
        return self._weights

    @weights.setter
    def weights(self, weights: WeightConfig) -> None:
        self._weights = weights

    def __len__(self) -> int:
        return len(self._snapshots)

    def set_weight(self, sub_score: str, key: str, weight: float) -> WeightConfig:
        """
        Change one sub-score input weight for every snapshot.

        Returns:
            The new WeightConfig now in use
        """
        self._weights = self._weights.with_weight(sub_score, key, weight)
        _log.debug("Weight %s.%s set to %s", sub_score, key, weight)
        return self._weights

    def next_label(self) -> str:
        """Default label for the next visit: T1, T2, ..."""
        return f"T{len(self._snapshots) + 1}"

    def append_snapshot(self, snapshot: MeasurementSnapshot) -> None:
        """Store a new visit and make it the current sample."""
        self._snapshots.append(snapshot)
        self._previous, self._current = self._current, snapshot
        _log.debug("Appended snapshot %s (%d stored)", snapshot.label, len(self._snapshots))

    def replace_current(self, snapshot: MeasurementSnapshot) -> None:
        """Swap the working sample without adding it to the stored visits."""
        self._previous, self._current = self._current, snapshot
        _log.debug("Current sample replaced with %s", snapshot.label)

    def composites_for(self, snapshot: MeasurementSnapshot) -> CompositeScores:
        return compute_composites(snapshot, self._weights, self._reference_ranges)

    def current_composites(self) -> Optional[CompositeScores]:
        if self._current is None:
            return None
        return self.composites_for(self._current)

    def previous_composites(self) -> Optional[CompositeScores]:
        if self._previous is None:
            return None
        return self.composites_for(self._previous)

    def recompute_series(self) -> CompositeSeries:
        """
        Recompute both composites for every stored snapshot.

        Uses the weights in effect now, so earlier visits are rescored
        whenever a weight changes.

        Returns:
            CompositeSeries with parallel label / menstrual / adrenal tuples
        """
        composites = [self.composites_for(snapshot) for snapshot in self._snapshots]
        return CompositeSeries(
            labels=self.labels,
            menstrual=tuple(c.menstrual for c in composites),
            adrenal=tuple(c.adrenal for c in composites),
        )

    def delta(self) -> Optional[CompositeDelta]:
        """
        Change in each composite from the previous to the current sample.

        Returns:
            CompositeDelta, or None until both a current and a previous
            sample exist
        """
        current = self.current_composites()
        previous = self.previous_composites()
        if current is None or previous is None:
            return None

        return CompositeDelta(
            menstrual=composite_delta(current.menstrual, previous.menstrual),
            adrenal=composite_delta(current.adrenal, previous.adrenal),
        )
