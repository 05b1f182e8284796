"""
Maximum-likelihood fitting of a family to observed data.

Turns a column of observations back into a DistributionSpec, so an
observed sample can be inspected and resampled like any constructed
distribution. Location-free families are fitted with loc pinned at 0 so
the result stays in the textbook parameterisation of families.py.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

import numpy as np
from scipy import stats

from .families import DistributionSpec, get_family, make_distribution

logger = logging.getLogger(__name__)


def _fit_normal(x: np.ndarray) -> Tuple[float, ...]:
    # MLE uses the biased (ddof=0) standard deviation
    return float(np.mean(x)), float(np.std(x))


def _fit_exponential(x: np.ndarray) -> Tuple[float, ...]:
    if (x < 0).any():
        raise ValueError("exponential fit requires non-negative observations")
    return (float(np.mean(x)),)


def _fit_gamma(x: np.ndarray) -> Tuple[float, ...]:
    if (x <= 0).any():
        raise ValueError("gamma fit requires strictly positive observations")
    shape, _, scale = stats.gamma.fit(x, floc=0.0)
    return float(shape), float(scale)


def _fit_lognormal(x: np.ndarray) -> Tuple[float, ...]:
    if (x <= 0).any():
        raise ValueError("lognormal fit requires strictly positive observations")
    logs = np.log(x)
    return float(np.mean(logs)), float(np.std(logs))


def _fit_uniform(x: np.ndarray) -> Tuple[float, ...]:
    return float(np.min(x)), float(np.max(x))


def _fit_poisson(x: np.ndarray) -> Tuple[float, ...]:
    if (x < 0).any() or not np.all(np.equal(np.mod(x, 1), 0)):
        raise ValueError("poisson fit requires non-negative integer observations")
    return (float(np.mean(x)),)


_FITTERS: Dict[str, Callable[[np.ndarray], Tuple[float, ...]]] = {
    "normal": _fit_normal,
    "exponential": _fit_exponential,
    "gamma": _fit_gamma,
    "lognormal": _fit_lognormal,
    "uniform": _fit_uniform,
    "poisson": _fit_poisson,
}


def fittable_families() -> Tuple[str, ...]:
    return tuple(sorted(_FITTERS))


def fit_distribution(values, family: str) -> DistributionSpec:
    """
    Fit `family` to `values` by maximum likelihood.

    Non-finite values are dropped before fitting.

    Raises
    ------
    KeyError            unknown family
    NotImplementedError family has no fitter
    ValueError          fewer than 2 usable observations, or data outside
                        the family's support
    """
    fam = get_family(family)
    if fam.name not in _FITTERS:
        raise NotImplementedError(
            f"Fitting is not implemented for '{fam.name}'. "
            f"Available: {list(fittable_families())}"
        )

    x = np.asarray(values, dtype=float).ravel()
    x = x[np.isfinite(x)]
    if len(x) < 2:
        raise ValueError(f"Need at least 2 finite observations to fit, got {len(x)}")

    fitted = _FITTERS[fam.name](x)
    spec = make_distribution(fam.name, *fitted)
    logger.debug("Fitted %s to %d observations", spec.label, len(x))
    return spec
