"""Score every analyte of a snapshot against the reference range table."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from .models import MeasurementSnapshot
from .reference_ranges import ReferenceTable
from .scoring import range_centered_score, status_from_range, is_missing, Status
from ..utils import get_logger

_log = get_logger(__name__)


@dataclass(frozen=True)
class AnalyteScore:
    """Range-centered score for one analyte.

    ``has_data`` separates "not measured" from a genuine mid-band result;
    both can carry the neutral score of 50.
    """
    name: str
    value: Optional[float]
    score: int
    has_data: bool
    status: Optional[Status] = None


def score_biomarkers(
    snapshot: MeasurementSnapshot,
    reference_ranges: ReferenceTable
) -> Dict[str, AnalyteScore]:
    """
    Score all analytes in the reference table for one snapshot.

    Analytes missing from the snapshot score 50 with has_data=False.
    Measurements for analytes outside the table are ignored.

    Args:
        snapshot: Measurements for one timepoint
        reference_ranges: Analyte -> ReferenceRange table

    Returns:
        Dict of analyte name -> AnalyteScore, in reference table order
    """
    scores: Dict[str, AnalyteScore] = {}

    for analyte, reference in reference_ranges.items():
        value = snapshot.get(analyte)
        missing = is_missing(value)
        scores[analyte] = AnalyteScore(
            name=analyte,
            value=None if missing else value,
            score=range_centered_score(value, reference.low, reference.high),
            has_data=not missing and reference.is_valid,
            status=status_from_range(value, reference.low, reference.high),
        )

    unknown = [name for name in snapshot.values if name not in reference_ranges]
    if unknown:
        _log.debug("Snapshot %s: no reference range for %s", snapshot.label, ", ".join(unknown))

    return scores


def biomarker_score_map(
    snapshot: MeasurementSnapshot,
    reference_ranges: ReferenceTable
) -> Dict[str, int]:
    """Plain analyte -> score mapping for aggregation."""
    return {
        name: result.score
        for name, result in score_biomarkers(snapshot, reference_ranges).items()
    }
