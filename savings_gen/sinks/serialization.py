"""Shared serialization utilities for sinks."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    return {key: serialize_value(value) for key, value in asdict(obj).items()}


def table_to_records(table: pd.DataFrame) -> list[dict]:
    """Convert a table to a list of JSON-ready row dicts."""
    return [
        {key: serialize_value(value) for key, value in row.items()}
        for row in table.to_dict(orient="records")
    ]


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Missing markers (NaN, NaT, None) become ``None``; dates become
    ISO-8601 strings, dropping a midnight time component.
    """
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_value(v) for v in value]
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, np.bool_):
        return bool(value)
    return value
