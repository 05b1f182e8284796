from __future__ import annotations

from typing import Iterable, List, Union

import numpy as np
import pandas as pd

from .schema import SAMPLE_COLUMN_PREFIX


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def require_numeric_column(df: pd.DataFrame, col: str) -> np.ndarray:
    """Return `col` as a float array; raises if missing or not numeric."""
    require_columns(df, [col])
    series = df[col]
    if not (pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series)):
        raise ValueError(f"Column {col!r} is not numeric (dtype={series.dtype}).")
    return series.to_numpy(dtype=float)


def check_probability(p: Union[float, np.ndarray], name: str = "p") -> None:
    arr = np.asarray(p, dtype=float)
    if np.isnan(arr).any() or (arr < 0.0).any() or (arr > 1.0).any():
        raise ValueError(f"{name} must lie in [0, 1], got {p!r}")


def check_confidence(confidence: float) -> None:
    if not 0.0 < confidence < 1.0:
        raise ValueError(
            f"confidence must be strictly between 0 and 1, got {confidence!r}"
        )


def default_column_names(k: int, prefix: str = SAMPLE_COLUMN_PREFIX) -> List[str]:
    """x1, x2, ..., xk, the names given to sampled columns."""
    return [f"{prefix}{i}" for i in range(1, k + 1)]


def numeric_columns(df: pd.DataFrame) -> List[str]:
    """Names of the numeric, non-boolean columns of df, in order."""
    return [
        c for c in df.columns
        if pd.api.types.is_numeric_dtype(df[c]) and not pd.api.types.is_bool_dtype(df[c])
    ]
