"""
Distributions package — construct, sample, inspect, and fit parametric distributions.

  1. families.py    — the family registry and the immutable DistributionSpec
  2. sampler.py     — draw samples and assemble them into a table
  3. inspection.py  — parameters, pdf/cdf/quantile, moments, density curves
  4. fitting.py     — maximum-likelihood fit of a family to observed data
"""

from .families import (
    STANDARD_NORMAL,
    DistributionFamily,
    DistributionSpec,
    available_families,
    get_family,
    make_distribution,
)
from .fitting import fit_distribution, fittable_families
from .inspection import cdf, density_curve, describe, mean, params, pdf, quantile, std, var
from .sampler import DistributionSampler, SampledTable, sample_columns

__all__ = [
    "STANDARD_NORMAL",
    "DistributionFamily",
    "DistributionSpec",
    "available_families",
    "get_family",
    "make_distribution",
    "fit_distribution",
    "fittable_families",
    "cdf",
    "density_curve",
    "describe",
    "mean",
    "params",
    "pdf",
    "quantile",
    "std",
    "var",
    "DistributionSampler",
    "SampledTable",
    "sample_columns",
]
