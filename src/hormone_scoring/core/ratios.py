"""Derived analyte ratios and their target-based scores."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .models import MeasurementSnapshot
from .scoring import ratio_score, is_missing


@dataclass(frozen=True)
class RatioDefinition:
    """A named ratio between two analytes and the target it is scored against."""
    ratio_id: str
    numerator: str
    denominator: str
    target: float
    label: str


@dataclass(frozen=True)
class RatioResult:
    """Computed ratio value (None when undefined) and its score."""
    ratio_id: str
    value: Optional[float]
    target: float
    score: int

    @property
    def has_data(self) -> bool:
        return self.value is not None


# Targets are demo placeholders, fixed domain constants
CORTISOL_TO_DHEA = RatioDefinition(
    'cortisol_to_dhea', 'Cortisol', 'DHEA', 0.08, 'Cortisol : DHEA'
)
CORTISOL_TO_CORTISONE = RatioDefinition(
    'cortisol_to_cortisone', 'Cortisol', 'Cortisone', 4.5, 'Cortisol : Cortisone'
)
ESTRADIOL_TO_ESTRONE = RatioDefinition(
    'estradiol_to_estrone', 'Estradiol', 'Estrone', 0.6, 'Estradiol : Estrone'
)
HYDROXYESTRONE_TO_ESTRONE = RatioDefinition(
    'hydroxyestrone_to_estrone', '2-Hydroxyestrone', 'Estrone', 0.1, '2-Hydroxyestrone : Estrone'
)

RATIO_DEFINITIONS: Tuple[RatioDefinition, ...] = (
    CORTISOL_TO_DHEA,
    CORTISOL_TO_CORTISONE,
    ESTRADIOL_TO_ESTRONE,
    HYDROXYESTRONE_TO_ESTRONE,
)

RATIOS_BY_ID: Dict[str, RatioDefinition] = {r.ratio_id: r for r in RATIO_DEFINITIONS}


def safe_ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    """
    Divide two measurements, guarding absent operands and zero divisors.

    Returns:
        numerator / denominator, or None when undefined
    """
    if is_missing(numerator) or is_missing(denominator) or denominator == 0:
        return None
    return numerator / denominator


def calculate_ratios(snapshot: MeasurementSnapshot) -> Dict[str, Optional[float]]:
    """
    Calculate every defined ratio from raw snapshot values.

    Args:
        snapshot: Measurements for one timepoint

    Returns:
        Dict of ratio_id -> ratio value (None when undefined)
    """
    return {
        definition.ratio_id: safe_ratio(
            snapshot.get(definition.numerator),
            snapshot.get(definition.denominator)
        )
        for definition in RATIO_DEFINITIONS
    }


def score_ratios(snapshot: MeasurementSnapshot) -> Dict[str, RatioResult]:
    """
    Calculate and score every defined ratio against its target.

    Undefined ratios score a neutral 50.
    """
    values = calculate_ratios(snapshot)
    return {
        definition.ratio_id: RatioResult(
            ratio_id=definition.ratio_id,
            value=values[definition.ratio_id],
            target=definition.target,
            score=ratio_score(values[definition.ratio_id], definition.target),
        )
        for definition in RATIO_DEFINITIONS
    }
