"""
Core package — configuration, schema constants, and shared input checks.
No statistics live here.
"""

from .config import GuideConfig, IntervalConfig, SamplingConfig, TableIOConfig
from .schema import DEFAULT_PERCENTILES, DENSITY_CURVE_COLUMNS, SAMPLE_COLUMN_PREFIX
from .utils import (
    check_confidence,
    check_probability,
    default_column_names,
    numeric_columns,
    require_columns,
    require_numeric_column,
)

__all__ = [
    "GuideConfig",
    "IntervalConfig",
    "SamplingConfig",
    "TableIOConfig",
    "DEFAULT_PERCENTILES",
    "DENSITY_CURVE_COLUMNS",
    "SAMPLE_COLUMN_PREFIX",
    "check_confidence",
    "check_probability",
    "default_column_names",
    "numeric_columns",
    "require_columns",
    "require_numeric_column",
]
