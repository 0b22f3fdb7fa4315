"""Sub-score weight configuration and fixed category weights.

Weights come in two tiers:

- WeightConfig: per-input weights inside each sub-score. User adjustable;
  every change produces a new config value.
- CATEGORY_WEIGHTS / FIXED_RATIO_WEIGHTS: domain constants combining
  sub-scores into composites. Never read from configuration.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Any
import math


# Sub-score names
ESTROGEN_BALANCE = 'estrogen_balance'
PROGESTERONE_SUFFICIENCY = 'progesterone_sufficiency'
MENOPAUSE_TRANSITION = 'menopause_transition'
CORTISOL_HOMEOSTASIS = 'cortisol_homeostasis'
ADRENAL_ADAPTABILITY = 'adrenal_adaptability'

SUB_SCORES = (
    ESTROGEN_BALANCE,
    PROGESTERONE_SUFFICIENCY,
    MENOPAUSE_TRANSITION,
    CORTISOL_HOMEOSTASIS,
    ADRENAL_ADAPTABILITY,
)

# Composite categories
MENSTRUAL = 'menstrual'
ADRENAL = 'adrenal'

CATEGORY_WEIGHTS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    MENSTRUAL: MappingProxyType({
        ESTROGEN_BALANCE: 3,
        PROGESTERONE_SUFFICIENCY: 2,
        MENOPAUSE_TRANSITION: 1,
    }),
    ADRENAL: MappingProxyType({
        CORTISOL_HOMEOSTASIS: 3,
        ADRENAL_ADAPTABILITY: 2,
    }),
})

# Ratio inputs to estrogen balance carry fixed weights
FIXED_RATIO_WEIGHTS: Mapping[str, float] = MappingProxyType({
    'estradiol_to_estrone': 2,
    'hydroxyestrone_to_estrone': 2,
})


def _freeze(weights: Mapping[str, Mapping[str, Any]]) -> Mapping[str, Mapping[str, float]]:
    frozen: Dict[str, Mapping[str, float]] = {}
    for sub_score, inputs in weights.items():
        if not isinstance(inputs, Mapping):
            raise ValueError(f"Weights for '{sub_score}' must be a mapping of input -> weight")
        checked: Dict[str, float] = {}
        for key, weight in inputs.items():
            checked[str(key)] = _check_weight(sub_score, key, weight)
        frozen[str(sub_score)] = MappingProxyType(checked)
    return MappingProxyType(frozen)


def _check_weight(sub_score: str, key: str, weight: Any) -> float:
    if isinstance(weight, bool):
        raise ValueError(f"Weight {sub_score}.{key} must be a number, got {weight!r}")
    try:
        value = float(weight)
    except (TypeError, ValueError):
        raise ValueError(f"Weight {sub_score}.{key} must be a number, got {weight!r}") from None
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ValueError(f"Weight {sub_score}.{key} must be a finite non-negative number, got {weight!r}")
    return value


@dataclass(frozen=True)
class WeightConfig:
    """Immutable sub-score -> {input key -> weight} mapping.

    Input keys are analyte names, or ratio ids for adrenal adaptability.
    Weights not present read as 0.
    """
    weights: Mapping[str, Mapping[str, float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'weights', _freeze(self.weights))

    def weight(self, sub_score: str, key: str) -> float:
        return self.weights.get(sub_score, {}).get(key, 0.0)

    def for_sub_score(self, sub_score: str) -> Mapping[str, float]:
        return self.weights.get(sub_score, MappingProxyType({}))

    def with_weight(self, sub_score: str, key: str, weight: float) -> WeightConfig:
        """
        Return a new config with a single weight changed.

        Raises:
            ValueError: If the weight is negative or not a number
        """
        updated = {name: dict(inputs) for name, inputs in self.weights.items()}
        updated.setdefault(sub_score, {})[key] = _check_weight(sub_score, key, weight)
        return WeightConfig(updated)

    def with_sub_score(self, sub_score: str, inputs: Mapping[str, float]) -> WeightConfig:
        """Return a new config with every weight of one sub-score replaced."""
        updated = {name: dict(existing) for name, existing in self.weights.items()}
        updated[sub_score] = dict(inputs)
        return WeightConfig(updated)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {name: dict(inputs) for name, inputs in self.weights.items()}


DEFAULT_WEIGHTS = WeightConfig({
    ESTROGEN_BALANCE: {'Estradiol': 3, 'Estrone': 2, 'Estriol': 1, '2-Hydroxyestrone': 2},
    PROGESTERONE_SUFFICIENCY: {'Progesterone': 3, '17-Hydroxyprogesterone': 1, 'Pregnenolone': 1},
    MENOPAUSE_TRANSITION: {'Estradiol': 3, 'Progesterone': 2, 'DHEA': 1},
    CORTISOL_HOMEOSTASIS: {'Cortisol': 3, 'Cortisone': 2, 'Corticosterone': 1},
    ADRENAL_ADAPTABILITY: {'cortisol_to_dhea': 3, 'cortisol_to_cortisone': 2},
})
