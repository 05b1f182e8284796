"""
Query functions of a distribution: parameters, density, cumulative
probability, quantiles, and summary statistics.

Each query is independent and answers from the scipy frozen variable behind
the spec. Discrete families answer pdf() with their probability mass.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
import pandas as pd

from core.schema import DENSITY_CURVE_COLUMNS
from core.utils import check_probability

from .families import DistributionSpec

ArrayLike = Union[float, np.ndarray]


def _scalar_or_array(values: np.ndarray, like: Any) -> ArrayLike:
    if np.ndim(like) == 0:
        return float(values)
    return np.asarray(values, dtype=float)


def params(spec: DistributionSpec) -> Tuple[float, ...]:
    return spec.params


def cdf(spec: DistributionSpec, x: ArrayLike) -> ArrayLike:
    """P(X <= x)."""
    return _scalar_or_array(spec.frozen().cdf(x), x)


def pdf(spec: DistributionSpec, x: ArrayLike) -> ArrayLike:
    """Density at x (probability mass for discrete families)."""
    rv = spec.frozen()
    values = rv.pmf(x) if spec.is_discrete else rv.pdf(x)
    return _scalar_or_array(values, x)


def quantile(spec: DistributionSpec, p: ArrayLike) -> ArrayLike:
    """Inverse CDF: the value below which probability mass p falls."""
    check_probability(p, "p")
    return _scalar_or_array(spec.frozen().ppf(p), p)


def mean(spec: DistributionSpec) -> float:
    return float(spec.frozen().mean())


def std(spec: DistributionSpec) -> float:
    return float(spec.frozen().std())


def var(spec: DistributionSpec) -> float:
    return float(spec.frozen().var())


def describe(spec: DistributionSpec) -> Dict[str, Any]:
    """
    Summary statistics of a distribution.

    Moments that do not exist for the parameters (e.g. the variance of a t
    with df <= 2) come back as inf or nan, as scipy reports them.
    """
    rv = spec.frozen()
    m, v, s, k = rv.stats(moments="mvsk")
    lower, upper = rv.support()
    return {
        "family": spec.family,
        "params": spec.as_dict(),
        "mean": float(m),
        "std": float(np.sqrt(v)),
        "var": float(v),
        "median": float(rv.median()),
        "skewness": float(s),
        "kurtosis": float(k),  # excess kurtosis
        "support": (float(lower), float(upper)),
    }


def density_curve(
    spec: DistributionSpec,
    lower: Optional[float] = None,
    upper: Optional[float] = None,
    n_points: int = 200,
) -> pd.DataFrame:
    """
    Density evaluated over a point range, ready to hand to a plotting call.

    Parameters
    ----------
    lower, upper : float, optional
        Range to evaluate. Defaults to the 0.1% / 99.9% quantiles, which
        covers unbounded supports without running off to infinity.
    n_points : int
        Grid size for continuous families. Discrete families use every
        integer in [lower, upper] instead.

    Returns
    -------
    DataFrame with columns: x, density
    """
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")

    rv = spec.frozen()
    lo = float(rv.ppf(0.001)) if lower is None else float(lower)
    hi = float(rv.ppf(0.999)) if upper is None else float(upper)

    # a degenerate discrete default range (e.g. binomial with p=1) is one point
    single_point_ok = spec.is_discrete and lower is None and upper is None
    if lo > hi or (lo == hi and not single_point_ok):
        raise ValueError(f"Need lower < upper, got [{lo}, {hi}]")

    if spec.is_discrete:
        x = np.arange(np.ceil(lo), np.floor(hi) + 1.0)
        density = rv.pmf(x)
    else:
        x = np.linspace(lo, hi, n_points)
        density = rv.pdf(x)

    x_col, d_col = DENSITY_CURVE_COLUMNS
    return pd.DataFrame({x_col: x, d_col: density})
