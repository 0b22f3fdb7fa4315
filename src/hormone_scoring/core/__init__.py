"""Scoring core: primitive scores, aggregation, composites and history."""

from .scoring import (
    clamp,
    round_half_up,
    range_centered_score,
    ratio_score,
    score_analyte,
    score_ratio,
    status_from_range,
    band_for_score,
)
from .reference_ranges import ReferenceRange, DEFAULT_REFERENCE_RANGES, build_reference_table
from .models import MeasurementSnapshot
from .biomarker_scoring import AnalyteScore, score_biomarkers
from .ratios import RatioResult, calculate_ratios, score_ratios
from .aggregation import WeightedItem, weighted_average
from .weights import WeightConfig, DEFAULT_WEIGHTS, CATEGORY_WEIGHTS
from .composite import CompositeScores, SubScores, compute_composites, compute_sub_scores, score_snapshot, weighted_inputs
from .history import TimepointHistory, CompositeDelta, CompositeSeries, trend_direction

__all__ = [
    "clamp",
    "round_half_up",
    "range_centered_score",
    "ratio_score",
    "score_analyte",
    "score_ratio",
    "status_from_range",
    "band_for_score",
    "ReferenceRange",
    "DEFAULT_REFERENCE_RANGES",
    "build_reference_table",
    "MeasurementSnapshot",
    "AnalyteScore",
    "score_biomarkers",
    "RatioResult",
    "calculate_ratios",
    "score_ratios",
    "WeightedItem",
    "weighted_average",
    "WeightConfig",
    "DEFAULT_WEIGHTS",
    "CATEGORY_WEIGHTS",
    "CompositeScores",
    "SubScores",
    "compute_composites",
    "compute_sub_scores",
    "score_snapshot",
    "weighted_inputs",
    "TimepointHistory",
    "CompositeDelta",
    "CompositeSeries",
    "trend_direction",
]
