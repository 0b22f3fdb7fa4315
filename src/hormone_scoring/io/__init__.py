"""Engine I/O: YAML configuration and measurement readers."""

from .config_reader import EngineConfig, load_config, load_weights, load_reference_ranges, parse_weight_override
from .measurement_reader import read_timepoints, read_timepoints_yaml, read_timepoints_excel

__all__ = [
    "EngineConfig",
    "load_config",
    "load_weights",
    "load_reference_ranges",
    "parse_weight_override",
    "read_timepoints",
    "read_timepoints_yaml",
    "read_timepoints_excel",
]
