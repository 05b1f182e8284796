"""
Sampler — draws from a DistributionSpec and assembles the draws into a table.

Input:  a DistributionSpec (family + parameters) and a requested sample size
Output: a fixed-length array of draws, or an (n_rows × k) table of draws

Two ways to build a table:
  1. One distribution, k independent columns named x1..xk
       sampler = DistributionSampler(make_distribution("normal", 0, 1), seed=42)
       table = sampler.sample_table(100, n_columns=3)
  2. One distribution per named column
       table = sample_columns({"height": normal(170, 10), "wait": exponential(2)}, 100)

All randomness flows through a numpy Generator, so a seeded sampler is
reproducible run to run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.schema import DEFAULT_PERCENTILES
from core.utils import default_column_names

from .families import DistributionSpec


@dataclass
class SampledTable:
    """
    Output of sampling: an (n_rows × k) table plus the spec behind each column.
    """
    data: pd.DataFrame
    sources: Dict[str, DistributionSpec] = field(default_factory=dict)

    @property
    def n_rows(self) -> int:
        return len(self.data)

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self.data.columns)

    def to_dataframe(self) -> pd.DataFrame:
        return self.data.copy()

    def get_column(self, name: str) -> np.ndarray:
        if name not in self.data.columns:
            raise KeyError(f"Unknown column '{name}'. Available: {list(self.columns)}")
        return self.data[name].to_numpy()

    def summary(
        self,
        percentiles: Tuple[float, ...] = DEFAULT_PERCENTILES,
    ) -> pd.DataFrame:
        """Percentile summary of every sampled column, with its source distribution."""
        rows = []
        for name in self.columns:
            arr = self.data[name].to_numpy(dtype=float)
            spec = self.sources.get(name)
            row = {
                "Column": name,
                "Distribution": spec.label if spec is not None else "",
                "N": len(arr),
                "Mean": float(np.mean(arr)) if len(arr) else np.nan,
                "Std": float(np.std(arr, ddof=1)) if len(arr) > 1 else np.nan,
            }
            for p in percentiles:
                row[f"P{int(round(p * 100)):02d}"] = (
                    float(np.percentile(arr, p * 100)) if len(arr) else np.nan
                )
            rows.append(row)
        return pd.DataFrame(rows)


class DistributionSampler:
    """
    Draws samples from a single distribution.

    Usage:
        spec = make_distribution("normal", 0, 1)
        sampler = DistributionSampler(spec, seed=42)
        draws = sampler.sample(400)            # array of 400 values
        table = sampler.sample_table(400, 3)   # 400 × 3 table, columns x1..x3
    """

    def __init__(self, spec: DistributionSpec, seed: Optional[int] = None):
        self.spec = spec
        self.rng = np.random.default_rng(seed)
        self._rv = spec.frozen()

    def sample(self, n: int) -> np.ndarray:
        if n < 0:
            raise ValueError(f"Sample size must be >= 0, got {n}")
        draws = self._rv.rvs(size=int(n), random_state=self.rng)
        return np.atleast_1d(np.asarray(draws))

    def sample_table(
        self,
        n_rows: int,
        n_columns: int = 1,
        column_names: Optional[Sequence[str]] = None,
    ) -> SampledTable:
        """Draw n_rows × n_columns independent values into a table."""
        if column_names is None:
            column_names = default_column_names(n_columns)
        elif len(column_names) != n_columns:
            raise ValueError(
                f"Got {len(column_names)} column names for {n_columns} columns."
            )
        if len(set(column_names)) != len(column_names):
            raise ValueError(f"Column names must be unique: {list(column_names)}")
        if n_rows < 0:
            raise ValueError(f"Sample size must be >= 0, got {n_rows}")

        draws = self._rv.rvs(size=(int(n_rows), n_columns), random_state=self.rng)
        draws = np.asarray(draws).reshape(int(n_rows), n_columns)
        data = pd.DataFrame(draws, columns=list(column_names))
        return SampledTable(data=data, sources={c: self.spec for c in column_names})


def sample_columns(
    specs: Mapping[str, DistributionSpec],
    n_rows: int,
    *,
    seed: Optional[int] = None,
) -> SampledTable:
    """
    Draw one column per named distribution, all of length n_rows.

    Columns are drawn in mapping order from one shared generator, so the
    whole table is reproducible from a single seed.
    """
    if not specs:
        raise ValueError("Need at least one column specification.")
    if n_rows < 0:
        raise ValueError(f"Sample size must be >= 0, got {n_rows}")

    rng = np.random.default_rng(seed)
    columns: Dict[str, np.ndarray] = {}
    for name, spec in specs.items():
        draws = spec.frozen().rvs(size=int(n_rows), random_state=rng)
        columns[name] = np.atleast_1d(np.asarray(draws))

    return SampledTable(data=pd.DataFrame(columns), sources=dict(specs))
