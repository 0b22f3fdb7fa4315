"""Write per-timepoint scoring results to CSV/Excel."""

from __future__ import annotations
from pathlib import Path
from typing import List, Dict, Any, Optional, Sequence
import pandas as pd

from ..core.models import MeasurementSnapshot
from ..core.reference_ranges import ReferenceTable
from ..core.weights import WeightConfig
from ..core.composite import SnapshotScores, score_snapshot
from ..core.history import CompositeDelta, composite_delta, trend_direction
from ..core.scoring import band_for_score
from ..utils import get_logger

_log = get_logger(__name__)


def format_value(value: Any) -> Any:
    """
    Format a value for output, handling None and rounding floats.

    Args:
        value: Value to format

    Returns:
        Formatted value
    """
    if value is None:
        return "NO DATA"
    if isinstance(value, float):
        return round(value, 4)
    return value


def create_output_row(
    scores: SnapshotScores,
    delta: Optional[CompositeDelta] = None
) -> Dict[str, Any]:
    """
    Create a single output row for one timepoint.

    Args:
        scores: Every intermediate score for the timepoint
        delta: Change against the preceding timepoint, if any

    Returns:
        Dict with all output columns
    """
    composites = scores.composites
    sub_scores = scores.sub_scores

    row: Dict[str, Any] = {
        'Timepoint': scores.label,

        # Composites
        'Menstrual_Composite': composites.menstrual,
        'Menstrual_Band': band_for_score(composites.menstrual),
        'Menstrual_Delta': format_value(delta.menstrual if delta else None),
        'Menstrual_Trend': trend_direction(delta.menstrual) if delta else "NO DATA",
        'Adrenal_Composite': composites.adrenal,
        'Adrenal_Band': band_for_score(composites.adrenal),
        'Adrenal_Delta': format_value(delta.adrenal if delta else None),
        'Adrenal_Trend': trend_direction(delta.adrenal) if delta else "NO DATA",

        # Sub-scores
        'Estrogen_Balance': sub_scores.estrogen_balance,
        'Progesterone_Sufficiency': sub_scores.progesterone_sufficiency,
        'Menopause_Transition': sub_scores.menopause_transition,
        'Cortisol_Homeostasis': sub_scores.cortisol_homeostasis,
        'Adrenal_Adaptability': sub_scores.adrenal_adaptability,
    }

    # Ratios
    for ratio_id, result in scores.ratios.items():
        row[f'Ratio_{ratio_id}'] = format_value(result.value)
        row[f'Ratio_{ratio_id}_Score'] = result.score

    # Analyte scores; unmeasured analytes are flagged rather than shown as 50
    for name, result in scores.analytes.items():
        row[f'{name}_Score'] = result.score if result.has_data else "NO DATA"
        row[f'{name}_Status'] = result.status or "NO DATA"

    return row


def build_report_rows(
    snapshots: Sequence[MeasurementSnapshot],
    weights: WeightConfig,
    reference_ranges: ReferenceTable
) -> List[Dict[str, Any]]:
    """
    Score each timepoint and compute deltas against the one before it.

    Deltas are row-to-row over the stored snapshots. A what-if value set
    through TimepointHistory.replace_current is not stored, so it never
    appears here; use TimepointHistory.delta() for that comparison.

    Args:
        snapshots: Timepoints in order
        weights: Sub-score weights applied to every timepoint
        reference_ranges: Analyte -> ReferenceRange table

    Returns:
        List of output rows, one per timepoint
    """
    rows = []
    previous: Optional[SnapshotScores] = None

    for snapshot in snapshots:
        scores = score_snapshot(snapshot, weights, reference_ranges)
        delta = None
        if previous is not None:
            delta = CompositeDelta(
                menstrual=composite_delta(scores.composites.menstrual, previous.composites.menstrual),
                adrenal=composite_delta(scores.composites.adrenal, previous.composites.adrenal),
            )
        rows.append(create_output_row(scores, delta))
        previous = scores

    return rows


def write_results_csv(
    results: List[Dict[str, Any]],
    output_path: str | Path
) -> None:
    """
    Write results to CSV file.

    Args:
        results: List of result dicts (one per timepoint)
        output_path: Path to output CSV file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(results)
    df.to_csv(output_path, index=False)

    _log.info("Results written to: %s (%d timepoints)", output_path, len(results))


def write_results_excel(
    results: List[Dict[str, Any]],
    output_path: str | Path
) -> None:
    """
    Write results to Excel file.

    Args:
        results: List of result dicts (one per timepoint)
        output_path: Path to output Excel file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(results)
    df.to_excel(output_path, index=False, engine='openpyxl')

    _log.info("Results written to: %s (%d timepoints)", output_path, len(results))
