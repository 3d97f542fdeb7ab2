"""Utility modules."""

from sample_gain.utils.conversion import (
    db_to_ratio,
    db_to_ratio_exact,
    ratio_to_db,
    ratio_to_db_exact,
)
from sample_gain.utils.fastmath import log2, pow2

__all__ = [
    "db_to_ratio",
    "ratio_to_db",
    "db_to_ratio_exact",
    "ratio_to_db_exact",
    "log2",
    "pow2",
]
