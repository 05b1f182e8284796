"""
Workflow configuration.
Distribution parameters live in distributions/families.py (DistributionSpec).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class SamplingConfig:
    n_samples: int = 1000
    n_columns: int = 1
    seed: Optional[int] = 42

    def __post_init__(self) -> None:
        if self.n_samples < 0:
            raise ValueError(f"n_samples must be >= 0, got {self.n_samples}")
        if self.n_columns < 1:
            raise ValueError(f"n_columns must be >= 1, got {self.n_columns}")


@dataclass(frozen=True)
class IntervalConfig:
    confidence: float = 0.95

    # "normal", "t", or a DistributionSpec
    reference: Any = "normal"

    def __post_init__(self) -> None:
        if not 0.0 < self.confidence < 1.0:
            raise ValueError(
                f"confidence must be strictly between 0 and 1, got {self.confidence}"
            )


@dataclass(frozen=True)
class TableIOConfig:
    sep: str = ","
    index: bool = False
    float_format: Optional[str] = None  # None keeps full repr precision
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if len(self.sep) != 1:
            raise ValueError(f"sep must be a single character, got {self.sep!r}")


@dataclass(frozen=True)
class GuideConfig:
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    interval: IntervalConfig = field(default_factory=IntervalConfig)
    table_io: TableIOConfig = field(default_factory=TableIOConfig)
