"""
Estimation — point estimates, confidence intervals, and column summaries.
"""

from .intervals import (
    IntervalEstimate,
    SampleStatistics,
    column_interval,
    confidence_interval,
    critical_value,
    interval_from_statistics,
    margin_of_error,
    sample_statistics,
    table_intervals,
)
from .summary import summarize_column, summarize_table

__all__ = [
    "IntervalEstimate",
    "SampleStatistics",
    "column_interval",
    "confidence_interval",
    "critical_value",
    "interval_from_statistics",
    "margin_of_error",
    "sample_statistics",
    "table_intervals",
    "summarize_column",
    "summarize_table",
]
