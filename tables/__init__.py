"""
Tables — delimited-text persistence and data-quality validation.
"""

from .io import read_table, write_table
from .validators import ValidationResult, validate_table

__all__ = [
    "read_table",
    "write_table",
    "ValidationResult",
    "validate_table",
]
