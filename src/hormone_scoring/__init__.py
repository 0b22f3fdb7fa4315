"""Hormone scoring engine: biomarker scores, category composites and trends."""

from .core import (
    MeasurementSnapshot,
    ReferenceRange,
    WeightConfig,
    DEFAULT_REFERENCE_RANGES,
    DEFAULT_WEIGHTS,
    TimepointHistory,
    compute_composites,
    score_analyte,
    score_ratio,
)

__version__ = "0.1.0"

__all__ = [
    "MeasurementSnapshot",
    "ReferenceRange",
    "WeightConfig",
    "DEFAULT_REFERENCE_RANGES",
    "DEFAULT_WEIGHTS",
    "TimepointHistory",
    "compute_composites",
    "score_analyte",
    "score_ratio",
]
