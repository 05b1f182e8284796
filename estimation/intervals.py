"""
Point and interval estimates for the mean of one column.

For n observations with sample mean x̄ and sample standard deviation s:

    alpha  = 1 - confidence
    z      = (1 - alpha/2)-quantile of the reference distribution
    margin = z * s / sqrt(n)
    CI     = (x̄ - margin, x̄ + margin)

The reference distribution models the sampling error of the mean:
  "normal" — standard normal (large-sample / known-dispersion interval)
  "t"      — Student t with n - 1 degrees of freedom
  any DistributionSpec — its own quantile is used as the critical value
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
from scipy import stats

from core.schema import INTERVAL_TABLE_COLUMNS
from core.utils import check_confidence, numeric_columns, require_numeric_column
from distributions.families import DistributionSpec

logger = logging.getLogger(__name__)

Reference = Union[str, DistributionSpec]


@dataclass(frozen=True)
class SampleStatistics:
    """Unbiased point estimates from one column."""
    n: int
    mean: float
    std: float  # ddof=1

    @property
    def standard_error(self) -> float:
        return self.std / math.sqrt(self.n)


@dataclass(frozen=True)
class IntervalEstimate:
    """A symmetric two-sided confidence interval for a mean."""
    lower: float
    upper: float
    mean: float
    margin: float
    confidence: float
    n: int
    std: float
    critical_value: float
    reference: str

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def as_tuple(self) -> Tuple[float, float]:
        return self.lower, self.upper

    def __repr__(self) -> str:
        return (
            f"IntervalEstimate({self.confidence:.0%} CI: "
            f"[{self.lower:.4f}, {self.upper:.4f}], "
            f"mean={self.mean:.4f}, margin={self.margin:.4f}, n={self.n})"
        )


def sample_statistics(values) -> SampleStatistics:
    """
    Sample size, mean, and unbiased standard deviation of `values`.
    NaNs are dropped first; infinite values raise.
    """
    x = np.asarray(values, dtype=float).ravel()
    n_nan = int(np.isnan(x).sum())
    if n_nan:
        logger.debug("Dropping %d NaN observations", n_nan)
        x = x[~np.isnan(x)]
    n_inf = int(np.isinf(x).sum())
    if n_inf:
        raise ValueError(f"Observations must be finite, got {n_inf} infinite value(s)")
    n = len(x)
    if n < 2:
        raise ValueError(f"Need at least 2 observations, got {n}")
    return SampleStatistics(n=n, mean=float(np.mean(x)), std=float(np.std(x, ddof=1)))


def _reference_label(reference: Reference, n: Optional[int]) -> str:
    if isinstance(reference, DistributionSpec):
        return reference.label
    if reference == "t":
        return f"t(df={n - 1})"
    return str(reference)


def critical_value(
    confidence: float,
    reference: Reference = "normal",
    *,
    n: Optional[int] = None,
) -> float:
    """The (1 - alpha/2)-quantile of the reference distribution."""
    check_confidence(confidence)
    q = 1.0 - (1.0 - confidence) / 2.0

    if isinstance(reference, DistributionSpec):
        return float(reference.frozen().ppf(q))
    if reference == "normal":
        return float(stats.norm.ppf(q))
    if reference == "t":
        if n is None or n < 2:
            raise ValueError(f"The t reference needs n >= 2 observations, got n={n}")
        return float(stats.t.ppf(q, df=n - 1))
    raise ValueError(
        f"Unknown reference {reference!r}. Use 'normal', 't', or a DistributionSpec."
    )


def margin_of_error(
    std: float,
    n: int,
    confidence: float = 0.95,
    reference: Reference = "normal",
) -> float:
    """Half-width z * s / sqrt(n) of the symmetric interval."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if std < 0 or not math.isfinite(std):
        raise ValueError(f"std must be finite and >= 0, got {std}")
    z = critical_value(confidence, reference, n=n)
    return z * std / math.sqrt(n)


def interval_from_statistics(
    mean: float,
    std: float,
    n: int,
    confidence: float = 0.95,
    reference: Reference = "normal",
) -> IntervalEstimate:
    """Interval from already-computed summary statistics."""
    z = critical_value(confidence, reference, n=n)
    margin = margin_of_error(std, n, confidence, reference)
    return IntervalEstimate(
        lower=mean - margin,
        upper=mean + margin,
        mean=float(mean),
        margin=float(margin),
        confidence=float(confidence),
        n=int(n),
        std=float(std),
        critical_value=z,
        reference=_reference_label(reference, n),
    )


def confidence_interval(
    values,
    confidence: float = 0.95,
    reference: Reference = "normal",
) -> IntervalEstimate:
    """
    Confidence interval for the mean of `values`.

    Example
    -------
    >>> ci = confidence_interval(df["x1"], confidence=0.95)
    >>> ci.lower, ci.upper
    """
    s = sample_statistics(values)
    return interval_from_statistics(s.mean, s.std, s.n, confidence, reference)


def column_interval(
    df: pd.DataFrame,
    column: str,
    confidence: float = 0.95,
    reference: Reference = "normal",
) -> IntervalEstimate:
    return confidence_interval(require_numeric_column(df, column), confidence, reference)


def table_intervals(
    df: pd.DataFrame,
    columns: Optional[Sequence[str]] = None,
    confidence: float = 0.95,
    reference: Reference = "normal",
) -> pd.DataFrame:
    """
    One interval per column.

    Returns
    -------
    DataFrame with one row per column:
        Column, N, Mean, Std Dev, Confidence, Critical Value, Margin, Lower, Upper
    """
    if columns is None:
        columns = numeric_columns(df)

    rows = []
    for col in columns:
        ci = column_interval(df, col, confidence, reference)
        rows.append(dict(zip(INTERVAL_TABLE_COLUMNS, (
            col, ci.n, ci.mean, ci.std, ci.confidence,
            ci.critical_value, ci.margin, ci.lower, ci.upper,
        ))))
    return pd.DataFrame(rows, columns=list(INTERVAL_TABLE_COLUMNS))
