"""
Workflow runner — the four guide workflows and the chain that ties them together.

  1. Sampling:    distribution spec + sample size  → SampledTable
  2. Persistence: table + path                     → file on disk, read back
  3. Interval:    one numeric column + confidence  → IntervalEstimate
  4. Inspection:  distribution spec + query point  → InspectionResult

run_guide() chains them in the order the guide teaches:
sample → summarize → interval-estimate → persist (and read back).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from core.config import GuideConfig, IntervalConfig, SamplingConfig, TableIOConfig
from distributions import inspection
from distributions.families import DistributionSpec
from distributions.sampler import DistributionSampler, SampledTable
from estimation.intervals import IntervalEstimate, column_interval
from estimation.summary import summarize_table
from tables.io import read_table, write_table
from tables.validators import validate_table

logger = logging.getLogger(__name__)


@dataclass
class InspectionResult:
    """Answers to the inspection queries for one distribution."""
    spec: DistributionSpec
    params: Dict[str, float]
    mean: float
    std: float
    curve: pd.DataFrame
    x: Optional[float] = None
    cdf: Optional[float] = None
    pdf: Optional[float] = None
    p: Optional[float] = None
    quantile: Optional[float] = None


@dataclass
class GuideResult:
    """Everything the sample → summarize → estimate → persist chain produced."""
    spec: DistributionSpec
    table: SampledTable
    summary: pd.DataFrame
    column: str
    interval: IntervalEstimate
    path: Path
    reloaded: pd.DataFrame
    config: GuideConfig = field(default_factory=GuideConfig)


def run_sampling_workflow(
    spec: DistributionSpec,
    config: SamplingConfig = SamplingConfig(),
) -> SampledTable:
    sampler = DistributionSampler(spec, seed=config.seed)
    table = sampler.sample_table(config.n_samples, n_columns=config.n_columns)
    logger.info(
        "Sampled %d x %d from %s (seed=%s)",
        table.n_rows, len(table.columns), spec.label, config.seed,
    )
    return table


def run_persistence_workflow(
    table: Union[pd.DataFrame, SampledTable],
    path: Union[str, Path],
    config: TableIOConfig = TableIOConfig(),
) -> pd.DataFrame:
    """Write the table, then read it back as a DataFrame."""
    written = write_table(table, path, config=config)
    return read_table(written, pd.DataFrame, config=config)


def run_interval_workflow(
    table: Union[pd.DataFrame, SampledTable],
    column: str,
    config: IntervalConfig = IntervalConfig(),
) -> IntervalEstimate:
    df = table.data if isinstance(table, SampledTable) else table

    result = validate_table(df, required_columns=[column], numeric=False, min_rows=2)
    if not result.is_valid:
        raise ValueError(f"Table cannot be used for an interval estimate:\n{result.summary()}")
    for warning in result.warnings:
        logger.warning(warning)

    ci = column_interval(df, column, config.confidence, config.reference)
    logger.info("Interval for %r: %r", column, ci)
    return ci


def run_inspection_workflow(
    spec: DistributionSpec,
    *,
    x: Optional[float] = None,
    p: Optional[float] = None,
    curve_points: int = 200,
) -> InspectionResult:
    """
    Query a distribution. Point queries (cdf/pdf at x, quantile at p) are
    answered only when x / p are given.
    """
    return InspectionResult(
        spec=spec,
        params=spec.as_dict(),
        mean=inspection.mean(spec),
        std=inspection.std(spec),
        curve=inspection.density_curve(spec, n_points=curve_points),
        x=x,
        cdf=inspection.cdf(spec, x) if x is not None else None,
        pdf=inspection.pdf(spec, x) if x is not None else None,
        p=p,
        quantile=inspection.quantile(spec, p) if p is not None else None,
    )


def run_guide(
    spec: DistributionSpec,
    path: Union[str, Path],
    config: GuideConfig = GuideConfig(),
    *,
    column: Optional[str] = None,
) -> GuideResult:
    """
    Run the full chain: sample → summarize → interval-estimate → persist.

    Parameters
    ----------
    spec : DistributionSpec
        Distribution to sample from
    path : str or Path
        Where to write the sampled table
    config : GuideConfig
        Sampling, interval, and table I/O settings
    column : str, optional
        Column to estimate. Defaults to the first sampled column.

    Returns
    -------
    GuideResult with the table, its summary, the interval, and the table
    as read back from disk.
    """
    table = run_sampling_workflow(spec, config.sampling)
    summary = summarize_table(table.data)

    target = column if column is not None else table.columns[0]
    interval = run_interval_workflow(table, target, config.interval)

    reloaded = run_persistence_workflow(table, path, config.table_io)

    return GuideResult(
        spec=spec,
        table=table,
        summary=summary,
        column=target,
        interval=interval,
        path=Path(path),
        reloaded=reloaded,
        config=config,
    )
