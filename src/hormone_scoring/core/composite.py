"""Combine analyte and ratio scores into sub-scores and category composites."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from .models import MeasurementSnapshot
from .reference_ranges import ReferenceTable
from .biomarker_scoring import AnalyteScore, score_biomarkers
from .ratios import RatioResult, score_ratios
from .aggregation import WeightedItem, weighted_average
from .scoring import NEUTRAL_SCORE
from .weights import (
    WeightConfig,
    CATEGORY_WEIGHTS,
    FIXED_RATIO_WEIGHTS,
    MENSTRUAL,
    ADRENAL,
    ESTROGEN_BALANCE,
    PROGESTERONE_SUFFICIENCY,
    MENOPAUSE_TRANSITION,
    CORTISOL_HOMEOSTASIS,
    ADRENAL_ADAPTABILITY,
)
from ..utils import get_logger

_log = get_logger(__name__)


# Direct analyte inputs per sub-score; weights come from WeightConfig
ANALYTE_INPUTS: Dict[str, Tuple[str, ...]] = {
    ESTROGEN_BALANCE: ('Estradiol', 'Estrone', 'Estriol', '2-Hydroxyestrone'),
    PROGESTERONE_SUFFICIENCY: ('Progesterone', '17-Hydroxyprogesterone', 'Pregnenolone'),
    MENOPAUSE_TRANSITION: ('Estradiol', 'Progesterone', 'DHEA'),
    CORTISOL_HOMEOSTASIS: ('Cortisol', 'Cortisone', 'Corticosterone'),
    ADRENAL_ADAPTABILITY: (),
}

# Ratio inputs per sub-score weighted from WeightConfig
WEIGHTED_RATIO_INPUTS: Dict[str, Tuple[str, ...]] = {
    ADRENAL_ADAPTABILITY: ('cortisol_to_dhea', 'cortisol_to_cortisone'),
}


def weighted_inputs(sub_score: str) -> Tuple[str, ...]:
    """Input keys whose WeightConfig weight a sub-score reads."""
    return ANALYTE_INPUTS.get(sub_score, ()) + WEIGHTED_RATIO_INPUTS.get(sub_score, ())


@dataclass(frozen=True)
class SubScores:
    """Intermediate sub-scores (0-100) feeding the two composites."""
    estrogen_balance: int
    progesterone_sufficiency: int
    menopause_transition: int
    cortisol_homeostasis: int
    adrenal_adaptability: int

    def as_dict(self) -> Dict[str, int]:
        return {
            ESTROGEN_BALANCE: self.estrogen_balance,
            PROGESTERONE_SUFFICIENCY: self.progesterone_sufficiency,
            MENOPAUSE_TRANSITION: self.menopause_transition,
            CORTISOL_HOMEOSTASIS: self.cortisol_homeostasis,
            ADRENAL_ADAPTABILITY: self.adrenal_adaptability,
        }


@dataclass(frozen=True)
class CompositeScores:
    """Category composites for one snapshot.

    menstrual: Menstrual Irregularities & Fertility
    adrenal: Adrenal & Endocrine
    """
    menstrual: int
    adrenal: int


@dataclass(frozen=True)
class SnapshotScores:
    """Every intermediate result for one snapshot, for reporting."""
    label: str
    analytes: Dict[str, AnalyteScore]
    ratios: Dict[str, RatioResult]
    sub_scores: SubScores
    composites: CompositeScores


def _sub_score(
    sub_score: str,
    analyte_scores: Dict[str, AnalyteScore],
    ratio_results: Dict[str, RatioResult],
    weights: WeightConfig
) -> int:
    """Weighted average over one sub-score's analyte and ratio inputs."""
    items = []

    for analyte in ANALYTE_INPUTS[sub_score]:
        result = analyte_scores.get(analyte)
        items.append(WeightedItem(
            value=result.score if result is not None else NEUTRAL_SCORE,
            weight=weights.weight(sub_score, analyte)
        ))

    for ratio_id in WEIGHTED_RATIO_INPUTS.get(sub_score, ()):
        items.append(WeightedItem(
            value=ratio_results[ratio_id].score,
            weight=weights.weight(sub_score, ratio_id)
        ))

    if sub_score == ESTROGEN_BALANCE:
        for ratio_id, fixed_weight in FIXED_RATIO_WEIGHTS.items():
            items.append(WeightedItem(value=ratio_results[ratio_id].score, weight=fixed_weight))

    return weighted_average(items)


def _sub_scores_from_results(
    analyte_scores: Dict[str, AnalyteScore],
    ratio_results: Dict[str, RatioResult],
    weights: WeightConfig
) -> SubScores:
    return SubScores(**{
        name: _sub_score(name, analyte_scores, ratio_results, weights)
        for name in ANALYTE_INPUTS
    })


def _composites_from_sub_scores(sub_scores: SubScores) -> CompositeScores:
    values = sub_scores.as_dict()
    menstrual = weighted_average(
        WeightedItem(values[name], weight) for name, weight in CATEGORY_WEIGHTS[MENSTRUAL].items()
    )
    adrenal = weighted_average(
        WeightedItem(values[name], weight) for name, weight in CATEGORY_WEIGHTS[ADRENAL].items()
    )
    return CompositeScores(menstrual=menstrual, adrenal=adrenal)


def compute_sub_scores(
    snapshot: MeasurementSnapshot,
    weights: WeightConfig,
    reference_ranges: ReferenceTable
) -> SubScores:
    """
    Calculate the five sub-scores for one snapshot.

    Args:
        snapshot: Measurements for one timepoint
        weights: Per-input sub-score weights
        reference_ranges: Analyte -> ReferenceRange table

    Returns:
        SubScores with each sub-score in 0-100
    """
    return _sub_scores_from_results(
        score_biomarkers(snapshot, reference_ranges),
        score_ratios(snapshot),
        weights
    )


def compute_composites(
    snapshot: MeasurementSnapshot,
    weights: WeightConfig,
    reference_ranges: ReferenceTable
) -> CompositeScores:
    """
    Calculate both category composites for one snapshot.

    Menstrual = 3:2:1 over estrogen balance, progesterone sufficiency and
    menopause transition. Adrenal = 3:2 over cortisol homeostasis and
    adrenal adaptability. These top-level weights are fixed.

    Pure: the same snapshot, weights and table always give the same result.

    Args:
        snapshot: Measurements for one timepoint
        weights: Per-input sub-score weights
        reference_ranges: Analyte -> ReferenceRange table

    Returns:
        CompositeScores with both composites in 0-100
    """
    composites = _composites_from_sub_scores(
        compute_sub_scores(snapshot, weights, reference_ranges)
    )
    _log.debug(
        "Snapshot %s composites: menstrual=%d adrenal=%d",
        snapshot.label, composites.menstrual, composites.adrenal
    )
    return composites


def score_snapshot(
    snapshot: MeasurementSnapshot,
    weights: WeightConfig,
    reference_ranges: ReferenceTable
) -> SnapshotScores:
    """Score a snapshot and keep every intermediate result."""
    analyte_scores = score_biomarkers(snapshot, reference_ranges)
    ratio_results = score_ratios(snapshot)
    sub_scores = _sub_scores_from_results(analyte_scores, ratio_results, weights)

    return SnapshotScores(
        label=snapshot.label,
        analytes=analyte_scores,
        ratios=ratio_results,
        sub_scores=sub_scores,
        composites=_composites_from_sub_scores(sub_scores),
    )
