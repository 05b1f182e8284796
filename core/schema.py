from __future__ import annotations

from typing import Tuple

# Prefix for auto-named sample columns: x1, x2, ...
SAMPLE_COLUMN_PREFIX: str = "x"

# Columns of a density curve handed to a plotting call.
DENSITY_CURVE_COLUMNS: Tuple[str, ...] = ("x", "density")

# Percentile levels reported by the summary tables.
DEFAULT_PERCENTILES: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95)

# Columns of estimation.intervals.table_intervals() output.
INTERVAL_TABLE_COLUMNS: Tuple[str, ...] = (
    "Column",
    "N",
    "Mean",
    "Std Dev",
    "Confidence",
    "Critical Value",
    "Margin",
    "Lower",
    "Upper",
)
