"""
Safe math and JSON helpers shared by the roster views.
"""
from __future__ import annotations

import math
from enum import Enum

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total, rounded to one decimal."""
    return round(safe_divide(part, total) * 100, 1)


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas/enum values to native Python for JSON."""
    if isinstance(obj, dict):
        clean = {}
        for k, v in obj.items():
            if k is None:
                continue
            if isinstance(k, Enum):
                k = k.value
            clean[k if isinstance(k, str) else str(k)] = sanitize_for_json(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
