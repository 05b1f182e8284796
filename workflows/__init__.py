"""
Workflows — the guide's four usage patterns and the chain that runs them in order.
"""

from .report import GuideReport, build_report, generate_guide_report
from .runner import (
    GuideResult,
    InspectionResult,
    run_guide,
    run_inspection_workflow,
    run_interval_workflow,
    run_persistence_workflow,
    run_sampling_workflow,
)

__all__ = [
    "GuideReport",
    "build_report",
    "generate_guide_report",
    "GuideResult",
    "InspectionResult",
    "run_guide",
    "run_inspection_workflow",
    "run_interval_workflow",
    "run_persistence_workflow",
    "run_sampling_workflow",
]
