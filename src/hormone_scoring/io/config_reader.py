"""Load reference ranges and sub-score weights from YAML configuration."""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import yaml

from ..core.reference_ranges import ReferenceTable, build_reference_table
from ..core.composite import weighted_inputs
from ..core.weights import WeightConfig, SUB_SCORES
from ..utils import get_logger

_log = get_logger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / 'configs'
WEIGHTS_FILE = 'weights.yaml'
REFERENCE_RANGES_FILE = 'reference_ranges.yaml'


@dataclass(frozen=True)
class EngineConfig:
    """Reference table and weights the engine starts from."""
    reference_ranges: ReferenceTable
    weights: WeightConfig


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return data


def _known_inputs(sub_score: str, inputs: Dict[str, Any], path: Path) -> Dict[str, Any]:
    allowed = weighted_inputs(sub_score)
    unused = sorted(str(key) for key in inputs if key not in allowed)
    if unused:
        _log.warning(
            "Ignoring inputs %s never read by %s in %s", ", ".join(unused), sub_score, path
        )
    return {key: weight for key, weight in inputs.items() if key in allowed}


def load_weights(path: str | Path) -> WeightConfig:
    """
    Load sub-score weights from a YAML file.

    Expected layout:
        subscore_weights:
          estrogen_balance: {Estradiol: 3, ...}

    Unknown sub-scores and inputs a sub-score never reads are dropped
    with a warning.

    Args:
        path: Path to weights.yaml

    Returns:
        WeightConfig

    Raises:
        ValueError: If the section is missing or a weight is invalid
    """
    path = Path(path)
    data = _read_yaml(path)
    raw = data.get('subscore_weights')
    if not isinstance(raw, dict):
        raise ValueError(f"'subscore_weights' section missing in {path}")

    unknown = sorted(set(raw) - set(SUB_SCORES))
    if unknown:
        _log.warning("Ignoring unknown sub-scores in %s: %s", path, ", ".join(unknown))

    known = {}
    for name, inputs in raw.items():
        if name not in SUB_SCORES:
            continue
        if isinstance(inputs, dict):
            inputs = _known_inputs(name, inputs, path)
        known[name] = inputs

    weights = WeightConfig(known)
    _log.debug("Loaded weights for %d sub-scores from %s", len(weights.weights), path)
    return weights


def load_reference_ranges(path: str | Path) -> ReferenceTable:
    """
    Load the analyte reference range table from a YAML file.

    Expected layout:
        reference_ranges:
          Cortisol: {low: 5, high: 20, unit: ug/dL}

    Inverted or empty ranges are accepted (they score a neutral 50) but
    reported as warnings.

    Args:
        path: Path to reference_ranges.yaml

    Returns:
        Read-only analyte -> ReferenceRange table
    """
    path = Path(path)
    data = _read_yaml(path)
    raw = data.get('reference_ranges')
    if not isinstance(raw, dict):
        raise ValueError(f"'reference_ranges' section missing in {path}")

    table = build_reference_table(raw)
    for analyte, reference in table.items():
        if not reference.is_valid:
            _log.warning(
                "Reference range for %s is degenerate (%s >= %s); it will always score 50",
                analyte, reference.low, reference.high
            )
    _log.debug("Loaded %d reference ranges from %s", len(table), path)
    return table


def load_config(config_dir: str | Path | None = None) -> EngineConfig:
    """
    Load weights.yaml and reference_ranges.yaml from a directory.

    Args:
        config_dir: Directory holding both files (default: packaged configs)

    Returns:
        EngineConfig
    """
    config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
    if not config_dir.is_dir():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")

    config = EngineConfig(
        reference_ranges=load_reference_ranges(config_dir / REFERENCE_RANGES_FILE),
        weights=load_weights(config_dir / WEIGHTS_FILE),
    )
    _log.info("Loaded configuration from %s", config_dir)
    return config


def parse_weight_override(text: str) -> tuple[str, str, float]:
    """
    Parse a 'sub_score.input=weight' override.

    The input key may itself contain dots; the sub-score is everything
    before the first one.

    Example:
        >>> parse_weight_override('estrogen_balance.Estradiol=5')
        ('estrogen_balance', 'Estradiol', 5.0)
    """
    target, sep, raw_weight = text.partition('=')
    sub_score, dot, key = target.strip().partition('.')
    if not sep or not dot or not sub_score or not key:
        raise ValueError(f"Weight override must look like sub_score.input=weight, got '{text}'")
    if sub_score not in SUB_SCORES:
        raise ValueError(
            f"Unknown sub-score '{sub_score}' (expected one of: {', '.join(SUB_SCORES)})"
        )
    key = key.strip()
    if key not in weighted_inputs(sub_score):
        raise ValueError(
            f"'{sub_score}' has no weighted input '{key}' "
            f"(expected one of: {', '.join(weighted_inputs(sub_score))})"
        )
    try:
        weight = float(raw_weight)
    except ValueError:
        raise ValueError(f"Weight override '{text}' has a non-numeric weight") from None
    return sub_score, key, weight
