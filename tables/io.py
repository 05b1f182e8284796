"""
Persist tables to comma-delimited text and read them back.

Format: header row of column names, one line per row, no index column,
pandas default quoting. Floats are written with full repr precision unless
TableIOConfig.float_format says otherwise, and read back with
float_precision="round_trip", so a default write/read cycle reproduces the
values exactly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from core.config import TableIOConfig
from distributions.sampler import SampledTable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_OUTPUT_TYPES = (pd.DataFrame, dict, np.ndarray)


def write_table(
    table: Union[pd.DataFrame, SampledTable],
    path: PathLike,
    *,
    config: TableIOConfig = TableIOConfig(),
) -> Path:
    """Write `table` to `path` and return the path written."""
    df = table.data if isinstance(table, SampledTable) else table
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a DataFrame or SampledTable, got {type(table).__name__}")

    out = Path(path)
    df.to_csv(
        out,
        sep=config.sep,
        index=config.index,
        float_format=config.float_format,
        encoding=config.encoding,
    )
    logger.info("Wrote %d rows x %d columns to %s", len(df), df.shape[1], out)
    return out


def read_table(
    path: PathLike,
    into: type = pd.DataFrame,
    *,
    columns: Optional[Sequence[str]] = None,
    config: TableIOConfig = TableIOConfig(),
):
    """
    Read a delimited file into the requested structure.

    Parameters
    ----------
    into : type
        pd.DataFrame (default), dict (column name -> list of values), or
        np.ndarray (2-D float array, columns in file order).
    columns : sequence of str, optional
        Only read these columns.

    Malformed files raise whatever pandas raises.
    """
    if into not in _OUTPUT_TYPES:
        raise ValueError(
            f"Unsupported output type {getattr(into, '__name__', into)!r}. "
            f"Use one of: DataFrame, dict, ndarray"
        )

    df = pd.read_csv(
        Path(path),
        sep=config.sep,
        index_col=0 if config.index else None,
        encoding=config.encoding,
        float_precision="round_trip",
    )
    if config.index:
        df.index.name = None
    if columns is not None:
        df = df.loc[:, list(columns)]
    logger.info("Read %d rows x %d columns from %s", len(df), df.shape[1], path)

    if into is dict:
        return df.to_dict(orient="list")
    if into is np.ndarray:
        return df.to_numpy(dtype=float)
    return df
