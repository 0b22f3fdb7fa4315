"""Measurement snapshot model shared by the scorers and the history."""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class MeasurementSnapshot:
    """One labeled set of analyte measurements at a point in time.

    ``values`` maps analyte name -> measured value, or None when the
    analyte was not measured. The mapping is copied and made read-only,
    so a snapshot never changes after creation.
    """
    label: str
    values: Mapping[str, Optional[float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'values', MappingProxyType(dict(self.values)))

    def get(self, analyte: str) -> Optional[float]:
        """Measured value for an analyte, None if absent."""
        return self.values.get(analyte)

    def with_value(self, analyte: str, value: Optional[float]) -> MeasurementSnapshot:
        """Return a new snapshot with one measurement changed."""
        updated = dict(self.values)
        updated[analyte] = value
        return MeasurementSnapshot(self.label, updated)

    def relabeled(self, label: str) -> MeasurementSnapshot:
        """Return the same measurements under a new label."""
        return MeasurementSnapshot(label, self.values)
