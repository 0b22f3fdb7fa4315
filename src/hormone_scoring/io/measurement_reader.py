"""Readers for multi-timepoint hormone measurements (YAML and Excel)."""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional
import pandas as pd
import yaml

from ..core.models import MeasurementSnapshot
from ..utils import get_logger

_log = get_logger(__name__)


def safe_float(value: Any) -> Optional[float]:
    """
    Safely convert a value to float, returning None if not possible.

    Blank cells, NaN and text such as 'n/a' all read as not measured.

    Args:
        value: Value to convert

    Returns:
        Float value or None
    """
    if value is None or value == '':
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    return None if pd.isna(result) else result


def _snapshot_from_mapping(label: str, values: Dict[Any, Any]) -> MeasurementSnapshot:
    parsed: Dict[str, Optional[float]] = {}
    for analyte, raw in values.items():
        value = safe_float(raw)
        if value is None and isinstance(raw, str) and raw.strip():
            _log.warning("Timepoint %s: unreadable value %r for %s", label, raw, analyte)
        parsed[str(analyte).strip()] = value
    return MeasurementSnapshot(label, parsed)


def read_timepoints_yaml(path: str | Path) -> List[MeasurementSnapshot]:
    """
    Read labeled timepoints from a YAML file.

    Expected layout:
        timepoints:
          - label: T1
            values: {Progesterone: 2.1, ...}

    Timepoints without a label are named T1, T2, ... by position.

    Args:
        path: Path to YAML file

    Returns:
        List of MeasurementSnapshot in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Timepoint file not found: {path}")

    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    entries = data.get('timepoints') if isinstance(data, dict) else None
    if not isinstance(entries, list) or not entries:
        raise ValueError(f"No 'timepoints' list found in {path}")

    snapshots = []
    for i, entry in enumerate(entries, 1):
        if not isinstance(entry, dict) or not isinstance(entry.get('values'), dict):
            raise ValueError(f"Timepoint {i} in {path} needs a 'values' mapping")
        label = str(entry.get('label') or f"T{i}")
        snapshots.append(_snapshot_from_mapping(label, entry['values']))

    _log.info("Read %d timepoint(s) from %s", len(snapshots), path)
    return snapshots


def read_timepoints_excel(
    path: str | Path,
    sheet: int | str = 0
) -> List[MeasurementSnapshot]:
    """
    Read labeled timepoints from an Excel sheet.

    Layout: first column holds analyte names, each further column is one
    timepoint with its label in the header row.

    Args:
        path: Path to Excel workbook
        sheet: Sheet index or name

    Returns:
        List of MeasurementSnapshot in column order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Timepoint workbook not found: {path}")

    df = pd.read_excel(path, sheet_name=sheet, header=0, engine='openpyxl')
    if df.shape[1] < 2:
        raise ValueError(f"Expected an analyte column and at least one timepoint column in {path}")

    analyte_column = df.columns[0]
    df = df[df[analyte_column].notna()]
    analytes = [str(name).strip() for name in df[analyte_column]]

    snapshots = []
    for column in df.columns[1:]:
        label = str(column).strip()
        values = dict(zip(analytes, df[column].tolist()))
        snapshots.append(_snapshot_from_mapping(label, values))

    _log.info("Read %d timepoint(s) from %s", len(snapshots), path)
    return snapshots


def read_timepoints(path: str | Path) -> List[MeasurementSnapshot]:
    """Read timepoints from .yaml/.yml or .xlsx by file extension."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return read_timepoints_yaml(path)
    if suffix in ('.xlsx', '.xlsm'):
        return read_timepoints_excel(path)
    raise ValueError(f"Unsupported timepoint file type: {path.suffix}")
