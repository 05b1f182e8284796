"""
Display table for a guide run: what was sampled, what was estimated,
and where it was written, plus flags worth a second look.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd

from .runner import GuideResult


@dataclass
class GuideReport:
    """Structured summary of one guide run."""
    distribution: str
    n_rows: int
    n_columns: int
    column: str

    # Point / interval estimate
    sample_mean: float
    sample_std: float
    confidence: float
    reference: str
    critical_value: float
    margin: float
    lower: float
    upper: float

    # Distribution truth, when the family has a finite mean
    true_mean: float
    covers_true_mean: bool

    # Persistence
    path: str
    round_trip_ok: bool

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Distribution", "Value": self.distribution},
            {"Metric": "Sample Size", "Value": f"{self.n_rows} x {self.n_columns}"},
            {"Metric": "Column", "Value": self.column},
            {"Metric": "Sample Mean", "Value": f"{self.sample_mean:.4f}"},
            {"Metric": "Sample Std Dev", "Value": f"{self.sample_std:.4f}"},
            {"Metric": "Confidence", "Value": f"{self.confidence:.1%}"},
            {"Metric": "Reference", "Value": self.reference},
            {"Metric": "Critical Value", "Value": f"{self.critical_value:.4f}"},
            {"Metric": "Margin of Error", "Value": f"{self.margin:.4f}"},
            {"Metric": "Interval", "Value": f"[{self.lower:.4f}, {self.upper:.4f}]"},
            {"Metric": "True Mean", "Value": f"{self.true_mean:.4f}"},
            {"Metric": "Covers True Mean", "Value": "yes" if self.covers_true_mean else "no"},
            {"Metric": "Written To", "Value": self.path},
            {"Metric": "Round Trip", "Value": "ok" if self.round_trip_ok else "MISMATCH"},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def _round_trip_matches(result: GuideResult) -> bool:
    original = result.table.data
    reloaded = result.reloaded
    if list(original.columns) != list(reloaded.columns) or len(original) != len(reloaded):
        return False
    return bool(np.allclose(
        original.to_numpy(dtype=float),
        reloaded.to_numpy(dtype=float),
        equal_nan=True,
    ))


def generate_guide_report(result: GuideResult) -> GuideReport:
    ci = result.interval
    true_mean = float(result.spec.frozen().mean())
    covers = bool(np.isfinite(true_mean) and ci.contains(true_mean))
    round_trip_ok = _round_trip_matches(result)

    flags = []
    if not np.isfinite(true_mean):
        flags.append("NO_MEAN: distribution has no finite mean")
    elif not covers:
        flags.append("MISSED: interval does not cover the distribution mean")
    if ci.n < 30 and ci.reference == "normal":
        flags.append("SMALL_SAMPLE: n < 30 with a normal reference, consider 't'")
    if not round_trip_ok:
        flags.append("ROUND_TRIP: reloaded table differs from the sampled table")

    return GuideReport(
        distribution=result.spec.label,
        n_rows=result.table.n_rows,
        n_columns=len(result.table.columns),
        column=result.column,
        sample_mean=ci.mean,
        sample_std=ci.std,
        confidence=ci.confidence,
        reference=ci.reference,
        critical_value=ci.critical_value,
        margin=ci.margin,
        lower=ci.lower,
        upper=ci.upper,
        true_mean=true_mean,
        covers_true_mean=covers,
        path=str(result.path),
        round_trip_ok=round_trip_ok,
        flags=flags,
    )


def build_report(result: GuideResult) -> pd.DataFrame:
    """Metric / Value display table for a guide run."""
    return generate_guide_report(result).to_dataframe()
