"""Normalization: convert raw spreadsheet cell values for the pipeline."""

import math
from numbers import Real
from typing import Any, Optional

import numpy as np
import pandas as pd

UNKNOWN_NAME = "Unknown"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return bool(pd.isna(value))


def normalize_name(value: Any) -> str:
    """Render a name cell as text, falling back to UNKNOWN_NAME when empty."""
    if _is_blank(value):
        return UNKNOWN_NAME
    return str(value).strip()


def normalize_score(value: Any) -> Optional[int]:
    """
    Convert a score cell to an integer, truncating toward zero.

    Only numeric cells count: text, booleans, empty and non-finite
    values give None.

    Args:
        value: Raw cell value

    Returns:
        Integer score or None
    """
    if _is_blank(value):
        return None
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        return None
    if not math.isfinite(value):
        return None
    return int(value)
