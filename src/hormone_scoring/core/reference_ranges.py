"""Reference range table for hormone analytes."""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Any


@dataclass(frozen=True)
class ReferenceRange:
    """Clinically expected band for one analyte."""
    low: float
    high: float
    unit: str = ""

    @property
    def is_valid(self) -> bool:
        """False for degenerate ranges (low >= high), which always score 50."""
        return self.low < self.high


ReferenceTable = Mapping[str, ReferenceRange]


# Placeholder demo ranges; not for clinical use
DEFAULT_REFERENCE_RANGES: ReferenceTable = MappingProxyType({
    # Progestogens
    'Progesterone': ReferenceRange(1.0, 20.0, 'ng/mL'),
    'Pregnenolone': ReferenceRange(50, 200, 'ng/dL'),
    '17-Hydroxyprogesterone': ReferenceRange(20, 120, 'ng/dL'),

    # Estrogens
    'Estrone': ReferenceRange(30, 200, 'pg/mL'),
    'Estradiol': ReferenceRange(20, 300, 'pg/mL'),
    'Estriol': ReferenceRange(0.1, 10, 'ng/mL'),
    '2-Hydroxyestrone': ReferenceRange(1, 40, 'pg/mL'),

    # Androgens
    'Testosterone': ReferenceRange(15, 70, 'ng/dL'),
    'DHEA': ReferenceRange(100, 350, 'ng/dL'),
    'DHT': ReferenceRange(3, 30, 'ng/dL'),
    'Androstenedione': ReferenceRange(30, 200, 'ng/dL'),
    'Androsterone': ReferenceRange(50, 220, 'ng/dL'),
    'Hydroxytestosterone': ReferenceRange(1, 20, 'ng/dL'),

    # Corticosteroids
    'Cortisol': ReferenceRange(5, 20, 'ug/dL'),
    'Cortisone': ReferenceRange(1, 8, 'ug/dL'),
    'Corticosterone': ReferenceRange(0.1, 5, 'ug/dL'),
    'Aldosterone': ReferenceRange(4, 31, 'ng/dL'),
})


def build_reference_table(raw: Mapping[str, Mapping[str, Any]]) -> ReferenceTable:
    """
    Build a read-only reference table from plain nested dicts.

    Args:
        raw: Dict of analyte -> {low, high, unit}

    Returns:
        Read-only mapping of analyte -> ReferenceRange

    Raises:
        ValueError: If an entry is missing low/high or they are not numeric
    """
    table: Dict[str, ReferenceRange] = {}
    for analyte, entry in raw.items():
        if not isinstance(entry, Mapping) or 'low' not in entry or 'high' not in entry:
            raise ValueError(f"Reference range for '{analyte}' needs 'low' and 'high'")
        try:
            low = float(entry['low'])
            high = float(entry['high'])
        except (TypeError, ValueError):
            raise ValueError(
                f"Reference range for '{analyte}' has non-numeric bounds: "
                f"{entry['low']!r}-{entry['high']!r}"
            ) from None
        table[str(analyte)] = ReferenceRange(low, high, str(entry.get('unit') or ''))
    return MappingProxyType(table)


def with_reference_range(
    table: ReferenceTable,
    analyte: str,
    reference: ReferenceRange
) -> ReferenceTable:
    """Return a new table with one analyte's range added or replaced."""
    updated = dict(table)
    updated[analyte] = reference
    return MappingProxyType(updated)
