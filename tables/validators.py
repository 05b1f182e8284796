"""
Data quality validation for tables before they feed an estimate.

Catches problems early:
- Missing required columns
- Empty or too-short tables
- Duplicate column names
- Non-numeric columns where numbers are expected
- Null and non-finite cells
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
import pandas as pd


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a table."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_table(
    table: pd.DataFrame,
    *,
    required_columns: Sequence[str] = (),
    numeric: bool = True,
    min_rows: int = 1,
) -> ValidationResult:
    """
    Run all validation checks on a table.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Schema checks ---
    missing = [c for c in required_columns if c not in table.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result  # can't continue without columns

    dupes = table.columns[table.columns.duplicated()].tolist()
    if dupes:
        result.errors.append(f"Duplicate column names: {dupes}")
        return result  # per-column checks are ambiguous

    n = len(table)
    if n < min_rows:
        result.errors.append(f"Table has {n} rows, need at least {min_rows}.")
        return result

    # --- Per-column checks ---
    for col in table.columns:
        series = table[col]
        is_num = pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series)
        if numeric and not is_num:
            result.errors.append(f"Column {col!r} is not numeric (dtype={series.dtype}).")
            continue

        n_null = int(series.isna().sum())
        if n_null > 0:
            result.warnings.append(f"{n_null} rows have null {col!r}.")

        if is_num:
            vals = series.to_numpy(dtype=float)
            n_inf = int(np.isinf(vals).sum())
            if n_inf > 0:
                result.warnings.append(f"{n_inf} rows have non-finite {col!r}.")

    return result
