"""
Summarize table columns into distribution summaries.

Instead of one number per column, report the spread:
  "x1: mean=0.02, std=0.99, P05=-1.62, P95=1.66"
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.schema import DEFAULT_PERCENTILES
from core.utils import numeric_columns, require_numeric_column


def summarize_column(
    values,
    *,
    percentiles: Tuple[float, ...] = DEFAULT_PERCENTILES,
) -> Dict[str, float]:
    """
    Count, mean, unbiased std, min, percentiles, and max of one column.
    NaNs are ignored; an all-NaN column raises.
    """
    x = np.asarray(values, dtype=float).ravel()
    x = x[~np.isnan(x)]
    if len(x) == 0:
        raise ValueError("No non-null values to summarize.")

    row: Dict[str, float] = {
        "N": len(x),
        "Mean": float(np.mean(x)),
        "Std Dev": float(np.std(x, ddof=1)) if len(x) > 1 else float("nan"),
        "Min": float(np.min(x)),
    }
    for p in percentiles:
        row[f"P{int(round(p * 100)):02d}"] = float(np.percentile(x, p * 100))
    row["Max"] = float(np.max(x))
    return row


def summarize_table(
    df: pd.DataFrame,
    columns: Optional[Sequence[str]] = None,
    *,
    percentiles: Tuple[float, ...] = DEFAULT_PERCENTILES,
) -> pd.DataFrame:
    """
    One summary row per column.

    Parameters
    ----------
    columns : sequence of str, optional
        Columns to summarize. Defaults to every numeric column.
    """
    if columns is None:
        columns = numeric_columns(df)

    rows = []
    for col in columns:
        row = {"Column": col}
        row.update(summarize_column(require_numeric_column(df, col), percentiles=percentiles))
        rows.append(row)
    return pd.DataFrame(rows)
